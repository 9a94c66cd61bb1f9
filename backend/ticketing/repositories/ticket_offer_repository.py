"""
Ticket offer queries, including the allocation sum the capacity ledger
checks against. Tenant scoping goes offer -> show -> venue.
"""

from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models.show import Show
from ticketing.models.ticket_offer import TicketOffer
from ticketing.models.venue import Venue


class TicketOfferRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _scoped(tenant_id: int) -> Select:
        return (
            select(TicketOffer)
            .join(Show, TicketOffer.show_id == Show.id)
            .join(Venue, Show.venue_id == Venue.id)
            .where(Venue.tenant_id == tenant_id)
        )

    async def get(self, tenant_id: int, offer_id: int, refresh: bool = False) -> Optional[TicketOffer]:
        stmt = self._scoped(tenant_id).where(TicketOffer.id == offer_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_show_id(self, tenant_id: int, offer_id: int) -> Optional[int]:
        result = await self.session.execute(
            select(TicketOffer.show_id)
            .join(Show, TicketOffer.show_id == Show.id)
            .join(Venue, Show.venue_id == Venue.id)
            .where(TicketOffer.id == offer_id, Venue.tenant_id == tenant_id)
        )
        return result.scalar_one_or_none()

    async def list_by_show(self, show_id: int) -> list[TicketOffer]:
        result = await self.session.execute(
            select(TicketOffer)
            .where(TicketOffer.show_id == show_id)
            .order_by(TicketOffer.created_at.asc(), TicketOffer.id.asc())
        )
        return list(result.scalars().all())

    async def sum_allocated(self, show_id: int, exclude_offer_id: Optional[int] = None) -> int:
        """Sum of ticket_count over the show's offers, optionally leaving one out."""
        stmt = select(func.coalesce(func.sum(TicketOffer.ticket_count), 0)).where(
            TicketOffer.show_id == show_id
        )
        if exclude_offer_id is not None:
            stmt = stmt.where(TicketOffer.id != exclude_offer_id)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def add(self, offer: TicketOffer) -> TicketOffer:
        self.session.add(offer)
        await self.session.flush()
        await self.session.refresh(offer)
        return offer

    async def save(self, offer: TicketOffer) -> TicketOffer:
        await self.session.flush()
        await self.session.refresh(offer)
        return offer

    async def delete(self, offer: TicketOffer) -> None:
        await self.session.delete(offer)
        await self.session.flush()
