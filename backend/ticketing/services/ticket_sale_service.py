"""
Ticket sale service: recording sales against a tenant's shows.
"""

from ticketing.core.errors import ShowNotFoundError, TicketSaleNotFoundError
from ticketing.core.logging import get_logger
from ticketing.models.ticket_sale import TicketSale
from ticketing.schemas.ticket_sale import TicketSaleCreate, TicketSaleResponse, TicketSaleUpdate
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)


def to_response(sale: TicketSale) -> TicketSaleResponse:
    return TicketSaleResponse(
        id=sale.id,
        show_id=sale.show_id,
        show_start_time=sale.show.start_time,
        venue_name=sale.show.venue.name,
        act_name=sale.show.act.name,
        quantity=sale.quantity,
        created_at=sale.created_at,
        updated_at=sale.updated_at,
    )


async def list_ticket_sales(uow: UnitOfWork, tenant_id: int) -> list[TicketSale]:
    return await uow.ticket_sales.list_for_tenant(tenant_id)


async def list_ticket_sales_for_show(uow: UnitOfWork, tenant_id: int, show_id: int) -> list[TicketSale]:
    show = await uow.shows.get(tenant_id, show_id)
    if show is None:
        raise ShowNotFoundError(show_id)
    return await uow.ticket_sales.list_by_show(show.id)


async def get_ticket_sale(uow: UnitOfWork, tenant_id: int, sale_id: int) -> TicketSale:
    sale = await uow.ticket_sales.get(tenant_id, sale_id)
    if sale is None:
        raise TicketSaleNotFoundError(sale_id)
    return sale


async def create_ticket_sale(uow: UnitOfWork, tenant_id: int, sale_data: TicketSaleCreate) -> TicketSale:
    """Record a sale. The show must belong to the caller's tenant."""
    async with uow:
        show = await uow.shows.get(tenant_id, sale_data.show_id)
        if show is None:
            raise ShowNotFoundError(sale_data.show_id)

        sale = await uow.ticket_sales.add(TicketSale(show_id=show.id, quantity=sale_data.quantity))
        await uow.commit()

    logger.info(
        "ticket_sale_created",
        sale_id=sale.id,
        show_id=sale.show_id,
        tenant_id=tenant_id,
        quantity=sale.quantity,
    )
    return sale


async def update_ticket_sale(
    uow: UnitOfWork, tenant_id: int, sale_id: int, sale_data: TicketSaleUpdate
) -> TicketSale:
    async with uow:
        sale = await uow.ticket_sales.get(tenant_id, sale_id)
        if sale is None:
            raise TicketSaleNotFoundError(sale_id)
        sale.quantity = sale_data.quantity
        sale = await uow.ticket_sales.save(sale)
        await uow.commit()

    logger.info("ticket_sale_updated", sale_id=sale.id, tenant_id=tenant_id, quantity=sale.quantity)
    return sale


async def delete_ticket_sale(uow: UnitOfWork, tenant_id: int, sale_id: int) -> None:
    async with uow:
        sale = await uow.ticket_sales.get(tenant_id, sale_id)
        if sale is None:
            raise TicketSaleNotFoundError(sale_id)
        await uow.ticket_sales.delete(sale)
        await uow.commit()

    logger.info("ticket_sale_deleted", sale_id=sale_id, tenant_id=tenant_id)
