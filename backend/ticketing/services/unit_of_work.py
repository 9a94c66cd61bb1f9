"""
Explicit unit of work over one AsyncSession.

Write operations run as:

    async with uow:
        ...reads and writes through uow.<repository>...
        await uow.commit()

Entering begins a fresh transaction; leaving without a commit (including
leaving through an exception) rolls it back, so no partial write is ever
observable. Read-only operations may use the repositories without a
transaction.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.db.session import get_db
from ticketing.repositories import (
    ActRepository,
    ShowRepository,
    TenantRepository,
    TicketOfferRepository,
    TicketSaleRepository,
    UserRepository,
    VenueRepository,
)


class UnitOfWork:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenants = TenantRepository(session)
        self.users = UserRepository(session)
        self.venues = VenueRepository(session)
        self.acts = ActRepository(session)
        self.shows = ShowRepository(session)
        self.ticket_offers = TicketOfferRepository(session)
        self.ticket_sales = TicketSaleRepository(session)
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        await self.begin()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None or not self._committed:
            await self.rollback()

    async def begin(self) -> None:
        # Close any implicit read-only transaction so the checks inside this
        # unit of work see fresh state.
        if self.session.in_transaction():
            await self.session.commit()
        await self.session.begin()
        self._committed = False

    async def commit(self) -> None:
        await self.session.commit()
        self._committed = True

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(session: AsyncSession = Depends(get_db)) -> UnitOfWork:
    return UnitOfWork(session)
