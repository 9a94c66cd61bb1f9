"""
Pytest fixtures for test database, client, and authentication.

Each test gets a fresh SQLite file database (or the database named by
TEST_DATABASE_URL) with tables created from the models. Every HTTP request
gets its own session, the same way get_db hands them out in production.
"""

import os

os.environ.setdefault("REDIS_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ticketing.core.security import create_access_token, hash_password
from ticketing.db.base import Base
from ticketing.db.session import build_engine, get_db
from ticketing.main import app
from ticketing.models import Act, Show, Tenant, User, Venue
from ticketing.services.unit_of_work import UnitOfWork

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Create tables, yield engine, then drop tables for isolation."""
    url = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'ticketing_test.db'}"
    test_engine = build_engine(url)

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def uses_sqlite(engine: AsyncEngine) -> bool:
    return engine.dialect.name == "sqlite"


@pytest_asyncio.fixture(scope="function")
async def session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def uow(session_factory) -> AsyncGenerator[UnitOfWork, None]:
    """Unit of work on its own session, so its rollbacks never expire fixture objects."""
    async with session_factory() as session:
        yield UnitOfWork(session)


async def _client(session_factory, raise_app_exceptions: bool = True) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the DB dependency with the test database."""
    async for ac in _client(session_factory):
        yield ac


@pytest_asyncio.fixture(scope="function")
async def server_error_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Like `client`, but unhandled errors come back as the app's 500 response."""
    async for ac in _client(session_factory, raise_app_exceptions=False):
        yield ac


async def _persist(session: AsyncSession, obj):
    session.add(obj)
    await session.commit()
    await session.refresh(obj)
    return obj


@pytest_asyncio.fixture
async def tenant(db_session: AsyncSession) -> Tenant:
    return await _persist(
        db_session, Tenant(tenant_identifier="acme-events", name="Acme Events", slug="acme")
    )


@pytest_asyncio.fixture
async def other_tenant(db_session: AsyncSession) -> Tenant:
    return await _persist(
        db_session, Tenant(tenant_identifier="globex-live", name="Globex Live", slug="globex")
    )


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, tenant: Tenant) -> User:
    return await _persist(
        db_session,
        User(tenant_id=tenant.id, username="promoter", hashed_password=hash_password("testpassword123")),
    )


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession, other_tenant: Tenant) -> User:
    return await _persist(
        db_session,
        User(tenant_id=other_tenant.id, username="rival", hashed_password=hash_password("testpassword123")),
    )


def _headers_for(user: User) -> dict:
    token = create_access_token(
        data={"sub": str(user.id), "tenant_id": user.tenant_id, "username": user.username}
    )
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def auth_headers(test_user: User) -> dict:
    """Authorization headers with Bearer token for the primary tenant."""
    return _headers_for(test_user)


@pytest_asyncio.fixture
async def other_auth_headers(other_user: User) -> dict:
    """Authorization headers for a user in a different tenant."""
    return _headers_for(other_user)


@pytest_asyncio.fixture
async def venue(db_session: AsyncSession, tenant: Tenant) -> Venue:
    return await _persist(
        db_session,
        Venue(tenant_id=tenant.id, name="Main Hall", address="1 Arena Way", seating_capacity=2000),
    )


@pytest_asyncio.fixture
async def act(db_session: AsyncSession, tenant: Tenant) -> Act:
    return await _persist(db_session, Act(tenant_id=tenant.id, name="The Test Band"))


def future(days: int = 30, hours: int = 0) -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0) + timedelta(days=days, hours=hours)


@pytest_asyncio.fixture
async def show(db_session: AsyncSession, venue: Venue, act: Act) -> Show:
    """A show with 1000 tickets and no offers."""
    return await _persist(
        db_session,
        Show(venue_id=venue.id, act_id=act.id, start_time=future(), total_tickets=1000),
    )


@pytest_asyncio.fixture
async def small_show(db_session: AsyncSession, venue: Venue, act: Act) -> Show:
    """A show with 500 tickets and no offers."""
    return await _persist(
        db_session,
        Show(venue_id=venue.id, act_id=act.id, start_time=future(days=31), total_tickets=500),
    )


@pytest_asyncio.fixture
async def make_show(db_session: AsyncSession, venue: Venue, act: Act):
    """Factory for extra shows at the default venue."""

    async def _make(total_tickets: int, days: int = 30, hours: int = 0) -> Show:
        return await _persist(
            db_session,
            Show(
                venue_id=venue.id,
                act_id=act.id,
                start_time=future(days=days, hours=hours),
                total_tickets=total_tickets,
            ),
        )

    return _make
