"""
Ticket sale endpoints.
"""

from fastapi import APIRouter, Depends, Response, status

from ticketing.core.security import get_current_tenant_id
from ticketing.schemas.ticket_offer import ErrorResponse
from ticketing.schemas.ticket_sale import TicketSaleCreate, TicketSaleResponse, TicketSaleUpdate
from ticketing.services import ticket_sale_service
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

router = APIRouter(prefix="/ticket-sales", tags=["Ticket Sales"])


@router.get("/", response_model=list[TicketSaleResponse])
async def list_ticket_sales_endpoint(
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    sales = await ticket_sale_service.list_ticket_sales(uow, tenant_id)
    return [ticket_sale_service.to_response(s) for s in sales]


@router.get(
    "/by-show/{show_id}",
    response_model=list[TicketSaleResponse],
    responses={404: {"model": ErrorResponse}},
)
async def list_ticket_sales_for_show_endpoint(
    show_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    sales = await ticket_sale_service.list_ticket_sales_for_show(uow, tenant_id, show_id)
    return [ticket_sale_service.to_response(s) for s in sales]


@router.get("/{sale_id}", response_model=TicketSaleResponse, responses={404: {"model": ErrorResponse}})
async def get_ticket_sale_endpoint(
    sale_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    sale = await ticket_sale_service.get_ticket_sale(uow, tenant_id, sale_id)
    return ticket_sale_service.to_response(sale)


@router.post(
    "/",
    response_model=TicketSaleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
async def create_ticket_sale_endpoint(
    sale_data: TicketSaleCreate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    sale = await ticket_sale_service.create_ticket_sale(uow, tenant_id, sale_data)
    return ticket_sale_service.to_response(sale)


@router.put("/{sale_id}", response_model=TicketSaleResponse, responses={404: {"model": ErrorResponse}})
async def update_ticket_sale_endpoint(
    sale_id: int,
    sale_data: TicketSaleUpdate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    sale = await ticket_sale_service.update_ticket_sale(uow, tenant_id, sale_id, sale_data)
    return ticket_sale_service.to_response(sale)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket_sale_endpoint(
    sale_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    await ticket_sale_service.delete_ticket_sale(uow, tenant_id, sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
