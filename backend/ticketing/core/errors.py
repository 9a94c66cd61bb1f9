"""
Domain errors raised by services.

These are expected outcomes (not bugs): the HTTP layer maps each one to a
status code and a JSON body. Anything that is not a DomainError is treated
as an infrastructure failure and surfaces as a generic 500.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    NOT_FOUND = "NOT_FOUND"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    CAPACITY_CONFLICT = "CAPACITY_CONFLICT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"


class DomainError(Exception):
    """Base domain error with code, user-safe message and HTTP status."""

    status_code = 400
    headers: Optional[dict] = None

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"error_code": self.code.value, "message": self.message}

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Entity does not exist in the caller's tenant."""

    status_code = 404

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(ErrorCode.NOT_FOUND, f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class TenantNotFoundError(NotFoundError):
    def __init__(self, tenant_id: int) -> None:
        super().__init__("Tenant", tenant_id)


class VenueNotFoundError(NotFoundError):
    def __init__(self, venue_id: int) -> None:
        super().__init__("Venue", venue_id)


class ActNotFoundError(NotFoundError):
    def __init__(self, act_id: int) -> None:
        super().__init__("Act", act_id)


class ShowNotFoundError(NotFoundError):
    def __init__(self, show_id: int) -> None:
        super().__init__("Show", show_id)


class TicketOfferNotFoundError(NotFoundError):
    def __init__(self, offer_id: int) -> None:
        super().__init__("Ticket offer", offer_id)


class TicketSaleNotFoundError(NotFoundError):
    def __init__(self, sale_id: int) -> None:
        super().__init__("Ticket sale", sale_id)


class CapacityExceededError(DomainError):
    """Requested allocation does not fit in the show's remaining capacity."""

    status_code = 409

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            ErrorCode.CAPACITY_EXCEEDED,
            f"Requested {requested} tickets, but only {available} tickets available",
        )
        self.requested = requested
        self.available = available

    def to_dict(self) -> dict:
        return {**super().to_dict(), "requested": self.requested, "available": self.available}


class CapacityConflictError(DomainError):
    """Concurrent writers kept changing the show; the caller may retry."""

    status_code = 409

    def __init__(self, show_id: int) -> None:
        super().__init__(
            ErrorCode.CAPACITY_CONFLICT,
            "Ticket offer could not be saved due to concurrent changes. Please try again.",
        )
        self.show_id = show_id


class InvalidArgumentError(DomainError):
    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        super().__init__(ErrorCode.INVALID_ARGUMENT, message)
        self.field = field

    def to_dict(self) -> dict:
        return {**super().to_dict(), "field": self.field}


class AlreadyExistsError(DomainError):
    status_code = 409

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.ALREADY_EXISTS, message)


class AuthenticationError(DomainError):
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(ErrorCode.UNAUTHORIZED, message)


class ForbiddenError(DomainError):
    status_code = 403

    def __init__(self, message: str) -> None:
        super().__init__(ErrorCode.FORBIDDEN, message)
