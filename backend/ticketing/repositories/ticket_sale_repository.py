"""
Ticket sale queries. Tenant scoping goes sale -> show -> venue.
"""

from typing import Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models.show import Show
from ticketing.models.ticket_sale import TicketSale
from ticketing.models.venue import Venue


class TicketSaleRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _scoped(tenant_id: int) -> Select:
        return (
            select(TicketSale)
            .join(Show, TicketSale.show_id == Show.id)
            .join(Venue, Show.venue_id == Venue.id)
            .where(Venue.tenant_id == tenant_id)
        )

    async def get(self, tenant_id: int, sale_id: int) -> Optional[TicketSale]:
        result = await self.session.execute(self._scoped(tenant_id).where(TicketSale.id == sale_id))
        return result.unique().scalar_one_or_none()

    async def list_for_tenant(self, tenant_id: int) -> list[TicketSale]:
        result = await self.session.execute(
            self._scoped(tenant_id).order_by(TicketSale.created_at.asc(), TicketSale.id.asc())
        )
        return list(result.unique().scalars().all())

    async def list_by_show(self, show_id: int) -> list[TicketSale]:
        result = await self.session.execute(
            select(TicketSale)
            .where(TicketSale.show_id == show_id)
            .order_by(TicketSale.created_at.asc(), TicketSale.id.asc())
        )
        return list(result.unique().scalars().all())

    async def add(self, sale: TicketSale) -> TicketSale:
        self.session.add(sale)
        await self.session.flush()
        await self.session.refresh(sale)
        return sale

    async def save(self, sale: TicketSale) -> TicketSale:
        await self.session.flush()
        await self.session.refresh(sale)
        return sale

    async def delete(self, sale: TicketSale) -> None:
        await self.session.delete(sale)
        await self.session.flush()
