"""
Pydantic schemas for ticket sales.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class TicketSaleCreate(BaseModel):
    show_id: int = Field(..., gt=0)
    quantity: int = Field(..., ge=1)


class TicketSaleUpdate(BaseModel):
    # The show is fixed once the sale is recorded
    quantity: int = Field(..., ge=1)


class TicketSaleResponse(BaseModel):
    id: int
    show_id: int
    show_start_time: datetime
    venue_name: str
    act_name: str
    quantity: int
    created_at: datetime
    updated_at: Optional[datetime]
