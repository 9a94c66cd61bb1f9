"""
Pydantic schemas for ticket offers and show capacity.

Offer bodies are only type-checked here. Range rules (price above zero and
below 100000000 with at most two decimals, positive ticket count, non-empty
name) belong to the capacity ledger, which reports them as 400
INVALID_ARGUMENT before opening a transaction.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel


class TicketOfferCreate(BaseModel):
    name: str
    price: Decimal
    ticket_count: int


class TicketOfferUpdate(TicketOfferCreate):
    pass


class TicketOfferPatch(BaseModel):
    name: Optional[str] = None
    price: Optional[Decimal] = None
    ticket_count: Optional[int] = None


class TicketOfferResponse(BaseModel):
    id: int
    show_id: int
    name: str
    price: Decimal
    ticket_count: int
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class ShowCapacityResponse(BaseModel):
    show_id: int
    total_tickets: int
    allocated_tickets: int
    available_capacity: int

    model_config = {"from_attributes": True}


class CapacityExceededResponse(BaseModel):
    error_code: str = "CAPACITY_EXCEEDED"
    message: str
    requested: int
    available: int


class ErrorResponse(BaseModel):
    error_code: str
    message: str
