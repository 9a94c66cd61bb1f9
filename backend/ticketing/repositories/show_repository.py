"""
Show queries. Every lookup is scoped to a tenant through the show's venue;
a show in another tenant is indistinguishable from a missing one.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models.show import Show
from ticketing.models.venue import Venue


class ShowRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _scoped(tenant_id: int) -> Select:
        return (
            select(Show)
            .join(Venue, Show.venue_id == Venue.id)
            .where(Venue.tenant_id == tenant_id)
        )

    async def get(self, tenant_id: int, show_id: int) -> Optional[Show]:
        result = await self.session.execute(self._scoped(tenant_id).where(Show.id == show_id))
        return result.unique().scalar_one_or_none()

    async def get_for_update(self, tenant_id: int, show_id: int) -> Optional[Show]:
        """
        Fresh read of the show row under a row lock (SELECT ... FOR UPDATE on
        PostgreSQL; SQLite ignores the clause and serializes writers itself).
        populate_existing forces a reload even if the show is already in the
        identity map.
        """
        result = await self.session.execute(
            self._scoped(tenant_id)
            .where(Show.id == show_id)
            .with_for_update(of=Show)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one_or_none()

    async def list_by_act(self, tenant_id: int, act_id: int) -> list[Show]:
        result = await self.session.execute(
            self._scoped(tenant_id)
            .where(Show.act_id == act_id)
            .order_by(Show.start_time.asc(), Show.id.asc())
        )
        return list(result.unique().scalars().all())

    async def list_at_venue_between(
        self, venue_id: int, window_start: datetime, window_end: datetime
    ) -> list[Show]:
        result = await self.session.execute(
            select(Show)
            .where(
                Show.venue_id == venue_id,
                Show.start_time >= window_start,
                Show.start_time <= window_end,
            )
            .order_by(Show.start_time.asc())
        )
        return list(result.unique().scalars().all())

    async def bump_version(self, show_id: int, expected_version: int) -> bool:
        """
        Compare-and-set on the capacity version. Returns False when another
        transaction changed the show's allocation since `expected_version`
        was read.
        """
        result = await self.session.execute(
            update(Show)
            .where(Show.id == show_id, Show.version == expected_version)
            .values(version=Show.version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def add(self, show: Show) -> Show:
        self.session.add(show)
        await self.session.flush()
        await self.session.refresh(show)
        return show

    async def save(self, show: Show) -> Show:
        await self.session.flush()
        await self.session.refresh(show)
        return show

    async def delete(self, show: Show) -> None:
        await self.session.delete(show)
        await self.session.flush()
