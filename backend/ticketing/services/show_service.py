"""
Show service: scheduling shows for an act at a venue.

A show's total ticket count is bounded by the venue's seating capacity and
is fixed at creation. Ticket offers on the show are managed by the capacity
ledger.
"""

from datetime import datetime, timedelta, timezone

from ticketing.core.errors import ActNotFoundError, InvalidArgumentError, ShowNotFoundError, VenueNotFoundError
from ticketing.core.logging import get_logger
from ticketing.models.show import Show
from ticketing.schemas.show import NearbyShow, NearbyShowsResponse, ShowCreate, ShowResponse, ShowUpdate
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)

NEARBY_WINDOW = timedelta(hours=48)


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_response(show: Show) -> ShowResponse:
    return ShowResponse(
        id=show.id,
        act_id=show.act_id,
        act_name=show.act.name,
        venue_id=show.venue_id,
        venue_name=show.venue.name,
        venue_capacity=show.venue.seating_capacity,
        total_tickets=show.total_tickets,
        start_time=show.start_time,
        created_at=show.created_at,
        updated_at=show.updated_at,
    )


async def get_show(uow: UnitOfWork, tenant_id: int, show_id: int) -> Show:
    show = await uow.shows.get(tenant_id, show_id)
    if show is None:
        raise ShowNotFoundError(show_id)
    return show


async def list_shows_for_act(uow: UnitOfWork, tenant_id: int, act_id: int) -> list[Show]:
    if await uow.acts.get(tenant_id, act_id) is None:
        raise ActNotFoundError(act_id)
    return await uow.shows.list_by_act(tenant_id, act_id)


async def create_show(uow: UnitOfWork, tenant_id: int, act_id: int, show_data: ShowCreate) -> Show:
    """
    Schedule a show. The act and venue must belong to the tenant; the ticket
    count may not exceed the venue's seating capacity and the start time
    must be in the future.
    """
    start_time = _as_utc(show_data.start_time)
    if start_time <= datetime.now(timezone.utc):
        raise InvalidArgumentError("start_time", "Start time must be in the future")

    async with uow:
        act = await uow.acts.get(tenant_id, act_id)
        if act is None:
            raise ActNotFoundError(act_id)

        venue = await uow.venues.get(tenant_id, show_data.venue_id)
        if venue is None:
            raise VenueNotFoundError(show_data.venue_id)

        if show_data.total_tickets > venue.seating_capacity:
            raise InvalidArgumentError(
                "total_tickets",
                f"Ticket count cannot exceed venue capacity of {venue.seating_capacity}",
            )

        show = Show(
            act=act,
            venue=venue,
            start_time=start_time,
            total_tickets=show_data.total_tickets,
        )
        show = await uow.shows.add(show)
        await uow.commit()

    logger.info(
        "show_created",
        show_id=show.id,
        act_id=act_id,
        venue_id=show.venue_id,
        tenant_id=tenant_id,
        total_tickets=show.total_tickets,
    )
    return show


async def update_show(uow: UnitOfWork, tenant_id: int, show_id: int, show_data: ShowUpdate) -> Show:
    start_time = _as_utc(show_data.start_time)
    if start_time <= datetime.now(timezone.utc):
        raise InvalidArgumentError("start_time", "Start time must be in the future")

    async with uow:
        show = await uow.shows.get(tenant_id, show_id)
        if show is None:
            raise ShowNotFoundError(show_id)
        show.start_time = start_time
        show = await uow.shows.save(show)
        await uow.commit()

    logger.info("show_rescheduled", show_id=show.id, tenant_id=tenant_id)
    return show


async def delete_show(uow: UnitOfWork, tenant_id: int, show_id: int) -> None:
    """Delete a show; its ticket offers go with it."""
    async with uow:
        show = await uow.shows.get(tenant_id, show_id)
        if show is None:
            raise ShowNotFoundError(show_id)
        await uow.shows.delete(show)
        await uow.commit()

    logger.info("show_deleted", show_id=show_id, tenant_id=tenant_id)


async def get_nearby_shows(
    uow: UnitOfWork, tenant_id: int, venue_id: int, start_time: datetime
) -> NearbyShowsResponse:
    """Shows at the same venue within 48 hours either side of `start_time`."""
    venue = await uow.venues.get(tenant_id, venue_id)
    if venue is None:
        raise VenueNotFoundError(venue_id)

    reference = _as_utc(start_time)
    shows = await uow.shows.list_at_venue_between(
        venue.id, reference - NEARBY_WINDOW, reference + NEARBY_WINDOW
    )

    if not shows:
        message = "No other shows scheduled at this venue within 48 hours"
    else:
        message = f"{len(shows)} show(s) found within 48 hours"

    return NearbyShowsResponse(
        venue_id=venue.id,
        venue_name=venue.name,
        reference_time=reference,
        shows=[NearbyShow(show_id=s.id, act_name=s.act.name, start_time=s.start_time) for s in shows],
        message=message,
    )
