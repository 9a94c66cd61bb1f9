from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models.venue import Venue


class VenueRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, tenant_id: int, venue_id: int) -> Optional[Venue]:
        result = await self.session.execute(
            select(Venue).where(Venue.id == venue_id, Venue.tenant_id == tenant_id)
        )
        return result.scalar_one_or_none()

    async def list_for_tenant(self, tenant_id: int) -> list[Venue]:
        result = await self.session.execute(
            select(Venue).where(Venue.tenant_id == tenant_id).order_by(Venue.name.asc(), Venue.id.asc())
        )
        return list(result.scalars().all())

    async def add(self, venue: Venue) -> Venue:
        self.session.add(venue)
        await self.session.flush()
        await self.session.refresh(venue)
        return venue

    async def save(self, venue: Venue) -> Venue:
        await self.session.flush()
        await self.session.refresh(venue)
        return venue

    async def delete(self, venue: Venue) -> None:
        await self.session.delete(venue)
        await self.session.flush()
