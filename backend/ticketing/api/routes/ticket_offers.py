"""
Ticket offer endpoints addressed by offer id.
"""

from fastapi import APIRouter, Depends, Response, status

from ticketing.core.security import get_current_tenant_id
from ticketing.schemas.ticket_offer import (
    CapacityExceededResponse,
    ErrorResponse,
    TicketOfferPatch,
    TicketOfferResponse,
    TicketOfferUpdate,
)
from ticketing.services import capacity_ledger
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

router = APIRouter(prefix="/ticket-offers", tags=["Ticket Offers"])

WRITE_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": CapacityExceededResponse},
}


@router.get("/{offer_id}", response_model=TicketOfferResponse)
async def get_ticket_offer_endpoint(
    offer_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await capacity_ledger.get_ticket_offer(uow, tenant_id, offer_id)


@router.put("/{offer_id}", response_model=TicketOfferResponse, responses=WRITE_RESPONSES)
async def update_ticket_offer_endpoint(
    offer_id: int,
    offer_data: TicketOfferUpdate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Replace name, price and ticket count. The offer's own current allocation
    does not count against it, so lowering the count always succeeds.
    """
    return await capacity_ledger.update_ticket_offer(
        uow,
        tenant_id,
        offer_id,
        name=offer_data.name,
        price=offer_data.price,
        ticket_count=offer_data.ticket_count,
    )


@router.patch("/{offer_id}", response_model=TicketOfferResponse, responses=WRITE_RESPONSES)
async def patch_ticket_offer_endpoint(
    offer_id: int,
    offer_data: TicketOfferPatch,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Partial update; omitted fields keep the values stored when the write runs."""
    return await capacity_ledger.update_ticket_offer(
        uow,
        tenant_id,
        offer_id,
        name=offer_data.name,
        price=offer_data.price,
        ticket_count=offer_data.ticket_count,
    )


@router.delete("/{offer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_ticket_offer_endpoint(
    offer_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    await capacity_ledger.delete_ticket_offer(uow, tenant_id, offer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
