"""
Show endpoints, including the capacity view and ticket offer creation.
"""

from fastapi import APIRouter, Depends, Response, status

from ticketing.core.security import get_current_tenant_id
from ticketing.schemas.show import ShowResponse, ShowUpdate
from ticketing.schemas.ticket_offer import (
    CapacityExceededResponse,
    ErrorResponse,
    ShowCapacityResponse,
    TicketOfferCreate,
    TicketOfferResponse,
)
from ticketing.services import capacity_ledger, show_service
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

router = APIRouter(prefix="/shows", tags=["Shows"])


@router.get("/{show_id}", response_model=ShowResponse, responses={404: {"model": ErrorResponse}})
async def get_show_endpoint(
    show_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    show = await show_service.get_show(uow, tenant_id, show_id)
    return show_service.to_response(show)


@router.put("/{show_id}", response_model=ShowResponse)
async def update_show_endpoint(
    show_id: int,
    show_data: ShowUpdate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    show = await show_service.update_show(uow, tenant_id, show_id, show_data)
    return show_service.to_response(show)


@router.delete("/{show_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_show_endpoint(
    show_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    await show_service.delete_show(uow, tenant_id, show_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{show_id}/capacity",
    response_model=ShowCapacityResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_show_capacity_endpoint(
    show_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Total, allocated and available tickets for a show. Computed on every
    request; never cached.
    """
    capacity = await capacity_ledger.compute_capacity(uow, tenant_id, show_id)
    return ShowCapacityResponse.model_validate(capacity)


@router.get("/{show_id}/ticket-offers", response_model=list[TicketOfferResponse])
async def list_ticket_offers_endpoint(
    show_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await capacity_ledger.list_ticket_offers(uow, tenant_id, show_id)


@router.post(
    "/{show_id}/ticket-offers",
    response_model=TicketOfferResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": CapacityExceededResponse},
    },
)
async def create_ticket_offer_endpoint(
    show_id: int,
    offer_data: TicketOfferCreate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create a ticket offer on a show.

    The requested ticket count is checked against the show's available
    capacity inside the same transaction as the insert, so concurrent
    requests can never jointly allocate more than the show holds. Returns
    409 with `requested` and `available` when the offer does not fit.
    """
    return await capacity_ledger.create_ticket_offer(
        uow,
        tenant_id,
        show_id,
        name=offer_data.name,
        price=offer_data.price,
        ticket_count=offer_data.ticket_count,
    )
