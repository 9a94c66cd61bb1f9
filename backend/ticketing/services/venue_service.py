"""
Venue service handling CRUD operations within a tenant.
"""

from ticketing.core.errors import VenueNotFoundError
from ticketing.core.logging import get_logger
from ticketing.models.venue import Venue
from ticketing.schemas.venue import VenueCreate, VenueUpdate
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)


def _venue_fields(venue_data: VenueCreate) -> dict:
    fields = venue_data.model_dump()
    # A location needs both coordinates
    if fields["latitude"] is None or fields["longitude"] is None:
        fields["latitude"] = fields["longitude"] = None
    return fields


async def list_venues(uow: UnitOfWork, tenant_id: int) -> list[Venue]:
    return await uow.venues.list_for_tenant(tenant_id)


async def get_venue(uow: UnitOfWork, tenant_id: int, venue_id: int) -> Venue:
    venue = await uow.venues.get(tenant_id, venue_id)
    if venue is None:
        raise VenueNotFoundError(venue_id)
    return venue


async def create_venue(uow: UnitOfWork, tenant_id: int, venue_data: VenueCreate) -> Venue:
    async with uow:
        venue = await uow.venues.add(Venue(tenant_id=tenant_id, **_venue_fields(venue_data)))
        await uow.commit()

    logger.info("venue_created", venue_id=venue.id, tenant_id=tenant_id, capacity=venue.seating_capacity)
    return venue


async def update_venue(uow: UnitOfWork, tenant_id: int, venue_id: int, venue_data: VenueUpdate) -> Venue:
    """
    Update a venue. Lowering seating capacity does not touch existing shows:
    a show's ticket count is fixed when it is scheduled.
    """
    async with uow:
        venue = await uow.venues.get(tenant_id, venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)

        for field, value in _venue_fields(venue_data).items():
            setattr(venue, field, value)
        venue = await uow.venues.save(venue)
        await uow.commit()

    logger.info("venue_updated", venue_id=venue.id, tenant_id=tenant_id)
    return venue


async def delete_venue(uow: UnitOfWork, tenant_id: int, venue_id: int) -> None:
    """Delete a venue together with its shows and their ticket offers."""
    async with uow:
        venue = await uow.venues.get(tenant_id, venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        await uow.venues.delete(venue)
        await uow.commit()

    logger.info("venue_deleted", venue_id=venue_id, tenant_id=tenant_id)
