"""
Show capacity ledger: ticket offer writes that must respect show capacity.

INVARIANT
=========
For every show: sum(offer.ticket_count for its offers) <= show.total_tickets

CONCURRENCY STRATEGY: Row Lock + Optimistic Version Check
=========================================================

Problem:
  Two requests create offers on the same 1000-ticket show, 600 tickets each.
  Both read allocated=0, both see 1000 available, both insert.
  Result: 1200 tickets allocated on a 1000-ticket show.

Solution:
  Every write runs inside one UnitOfWork transaction:

  1. Re-read the show with SELECT ... FOR UPDATE (PostgreSQL blocks the
     second writer here until the first commits)
  2. Sum the current allocation from the ticket_offers table (fresh, never
     cached between requests)
  3. Reject with CapacityExceededError if the request does not fit
  4. UPDATE shows SET version = version + 1
     WHERE id = :show_id AND version = :version_read_in_step_1
  5. If rows_affected == 0 another writer changed the allocation since step
     1 -> roll back and retry from step 1
  6. Write the offer and commit

  The row lock covers databases that honour it; the version compare-and-set
  covers those that don't (SQLite) and any path that reached step 1 without
  the lock. Either way two writers that jointly overflow cannot both commit.

Updates exclude the offer's own current count from the allocated total, so
an update that keeps or lowers the count always fits.
"""

import time
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from ticketing.core.config import get_settings
from ticketing.core.errors import (
    CapacityConflictError,
    CapacityExceededError,
    InvalidArgumentError,
    ShowNotFoundError,
    TicketOfferNotFoundError,
)
from ticketing.core.logging import get_logger
from ticketing.core.metrics import capacity_check_latency, record_capacity_retry, record_offer_write
from ticketing.models.show import Show
from ticketing.models.ticket_offer import TicketOffer
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)
settings = get_settings()

MAX_NAME_LENGTH = 100
# ticket_offers.price is NUMERIC(10, 2)
MAX_PRICE = Decimal("100000000")


@dataclass(frozen=True)
class ShowCapacity:
    """Capacity view of a show, computed on demand and never stored."""

    show_id: int
    total_tickets: int
    allocated_tickets: int

    @property
    def available_capacity(self) -> int:
        return self.total_tickets - self.allocated_tickets


def _validate_name(name: str) -> str:
    if name is None or not name.strip():
        raise InvalidArgumentError("name", "Name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise InvalidArgumentError("name", f"Name cannot exceed {MAX_NAME_LENGTH} characters")
    return name.strip()


def _validate_price(price) -> Decimal:
    try:
        amount = Decimal(str(price))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidArgumentError("price", "Price must be a decimal number")
    if not amount.is_finite() or amount <= 0:
        raise InvalidArgumentError("price", "Price must be greater than zero")
    if amount >= MAX_PRICE:
        raise InvalidArgumentError("price", f"Price must be less than {MAX_PRICE}")
    if amount != amount.quantize(Decimal("0.01")):
        raise InvalidArgumentError("price", "Price cannot have more than 2 decimal places")
    return amount


def _validate_ticket_count(ticket_count: int) -> int:
    if isinstance(ticket_count, bool) or not isinstance(ticket_count, int):
        raise InvalidArgumentError("ticket_count", "Ticket count must be an integer")
    if ticket_count <= 0:
        raise InvalidArgumentError("ticket_count", "Ticket count must be greater than zero")
    return ticket_count


def validate_offer_fields(name: str, price, ticket_count: int) -> Decimal:
    """Range checks done before any transaction is opened. Returns the price as Decimal."""
    _validate_name(name)
    amount = _validate_price(price)
    _validate_ticket_count(ticket_count)
    return amount


async def compute_capacity(uow: UnitOfWork, tenant_id: int, show_id: int) -> ShowCapacity:
    """Read-only capacity of a show. Raises ShowNotFoundError."""
    show = await uow.shows.get(tenant_id, show_id)
    if show is None:
        raise ShowNotFoundError(show_id)

    allocated = await uow.ticket_offers.sum_allocated(show.id)
    return ShowCapacity(show_id=show.id, total_tickets=show.total_tickets, allocated_tickets=allocated)


async def list_ticket_offers(uow: UnitOfWork, tenant_id: int, show_id: int) -> list[TicketOffer]:
    show = await uow.shows.get(tenant_id, show_id)
    if show is None:
        raise ShowNotFoundError(show_id)
    return await uow.ticket_offers.list_by_show(show.id)


async def get_ticket_offer(uow: UnitOfWork, tenant_id: int, offer_id: int) -> TicketOffer:
    offer = await uow.ticket_offers.get(tenant_id, offer_id)
    if offer is None:
        raise TicketOfferNotFoundError(offer_id)
    return offer


async def _claim_show(uow: UnitOfWork, show: Show) -> bool:
    claimed = await uow.shows.bump_version(show.id, show.version)
    if not claimed:
        record_capacity_retry()
        logger.info("capacity_version_conflict", show_id=show.id, version_seen=show.version)
    return claimed


async def create_ticket_offer(
    uow: UnitOfWork,
    tenant_id: int,
    show_id: int,
    name: str,
    price,
    ticket_count: int,
    max_attempts: Optional[int] = None,
) -> TicketOffer:
    """
    Create a ticket offer if `ticket_count` fits in the show's available
    capacity, re-validated inside the write transaction.

    Raises InvalidArgumentError, ShowNotFoundError, CapacityExceededError,
    or CapacityConflictError after `max_attempts` lost version races.
    """
    amount = validate_offer_fields(name, price, ticket_count)
    attempts = max_attempts or settings.CAPACITY_MAX_RETRIES
    start = time.perf_counter()

    for attempt in range(1, attempts + 1):
        async with uow:
            show = await uow.shows.get_for_update(tenant_id, show_id)
            if show is None:
                raise ShowNotFoundError(show_id)

            allocated = await uow.ticket_offers.sum_allocated(show.id)
            available = show.total_tickets - allocated
            if ticket_count > available:
                record_offer_write("create", "capacity_exceeded")
                logger.warning(
                    "capacity_exceeded",
                    operation="create",
                    show_id=show.id,
                    requested=ticket_count,
                    available=available,
                )
                raise CapacityExceededError(requested=ticket_count, available=available)

            if not await _claim_show(uow, show):
                continue

            offer = await uow.ticket_offers.add(
                TicketOffer(show_id=show.id, name=name.strip(), price=amount, ticket_count=ticket_count)
            )
            await uow.commit()

        capacity_check_latency.labels(operation="create").observe(time.perf_counter() - start)
        record_offer_write("create", "success")
        logger.info(
            "ticket_offer_created",
            offer_id=offer.id,
            show_id=show_id,
            tenant_id=tenant_id,
            ticket_count=ticket_count,
            attempt=attempt,
        )
        return offer

    record_offer_write("create", "conflict")
    raise CapacityConflictError(show_id)


async def update_ticket_offer(
    uow: UnitOfWork,
    tenant_id: int,
    offer_id: int,
    name: Optional[str],
    price,
    ticket_count: Optional[int],
    max_attempts: Optional[int] = None,
) -> TicketOffer:
    """
    Update an offer's name, price and ticket count. A field passed as None
    keeps the value read from the locked offer row, so partial updates never
    write back a stale copy. The capacity limit is the show total minus every
    *other* offer's allocation.

    Raises InvalidArgumentError, TicketOfferNotFoundError,
    CapacityExceededError or CapacityConflictError.
    """
    new_name = _validate_name(name) if name is not None else None
    new_price = _validate_price(price) if price is not None else None
    new_count = _validate_ticket_count(ticket_count) if ticket_count is not None else None
    attempts = max_attempts or settings.CAPACITY_MAX_RETRIES
    start = time.perf_counter()

    for attempt in range(1, attempts + 1):
        async with uow:
            show_id = await uow.ticket_offers.get_show_id(tenant_id, offer_id)
            if show_id is None:
                raise TicketOfferNotFoundError(offer_id)

            show = await uow.shows.get_for_update(tenant_id, show_id)
            offer = await uow.ticket_offers.get(tenant_id, offer_id, refresh=True)
            if show is None or offer is None:
                raise TicketOfferNotFoundError(offer_id)

            requested = new_count if new_count is not None else offer.ticket_count
            allocated_to_others = await uow.ticket_offers.sum_allocated(show.id, exclude_offer_id=offer.id)
            available = show.total_tickets - allocated_to_others
            if requested > available:
                record_offer_write("update", "capacity_exceeded")
                logger.warning(
                    "capacity_exceeded",
                    operation="update",
                    show_id=show.id,
                    offer_id=offer.id,
                    requested=requested,
                    available=available,
                )
                raise CapacityExceededError(requested=requested, available=available)

            if not await _claim_show(uow, show):
                continue

            if new_name is not None:
                offer.name = new_name
            if new_price is not None:
                offer.price = new_price
            offer.ticket_count = requested
            offer = await uow.ticket_offers.save(offer)
            await uow.commit()

        capacity_check_latency.labels(operation="update").observe(time.perf_counter() - start)
        record_offer_write("update", "success")
        logger.info(
            "ticket_offer_updated",
            offer_id=offer.id,
            show_id=offer.show_id,
            tenant_id=tenant_id,
            ticket_count=requested,
            attempt=attempt,
        )
        return offer

    record_offer_write("update", "conflict")
    raise CapacityConflictError(show_id)


async def delete_ticket_offer(uow: UnitOfWork, tenant_id: int, offer_id: int) -> None:
    """Remove an offer; its tickets return to the show's available capacity."""
    async with uow:
        show_id = await uow.ticket_offers.get_show_id(tenant_id, offer_id)
        if show_id is None:
            raise TicketOfferNotFoundError(offer_id)

        show = await uow.shows.get_for_update(tenant_id, show_id)
        offer = await uow.ticket_offers.get(tenant_id, offer_id, refresh=True)
        if show is None or offer is None:
            raise TicketOfferNotFoundError(offer_id)

        # Freeing capacity cannot break the invariant; a lost version race
        # here is not retried.
        await uow.shows.bump_version(show.id, show.version)
        await uow.ticket_offers.delete(offer)
        await uow.commit()

    record_offer_write("delete", "success")
    logger.info("ticket_offer_deleted", offer_id=offer_id, show_id=show_id, tenant_id=tenant_id)
