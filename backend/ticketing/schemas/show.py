"""
Pydantic schemas for show-related request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ShowCreate(BaseModel):
    venue_id: int = Field(..., gt=0)
    total_tickets: int = Field(..., ge=0)
    start_time: datetime


class ShowUpdate(BaseModel):
    # Capacity is fixed at creation; only the schedule can change
    start_time: datetime


class ShowResponse(BaseModel):
    id: int
    act_id: int
    act_name: str
    venue_id: int
    venue_name: str
    venue_capacity: int
    total_tickets: int
    start_time: datetime
    created_at: datetime
    updated_at: Optional[datetime]


class NearbyShow(BaseModel):
    show_id: int
    act_name: str
    start_time: datetime


class NearbyShowsResponse(BaseModel):
    venue_id: int
    venue_name: str
    reference_time: datetime
    shows: list[NearbyShow]
    message: str
