"""
Pydantic schemas for venue-related request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class VenueCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=300)
    description: str = Field("", max_length=2000)
    seating_capacity: int = Field(..., gt=0, le=1_000_000)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)


class VenueUpdate(VenueCreate):
    pass


class VenueResponse(BaseModel):
    id: int
    name: str
    address: Optional[str]
    description: str
    seating_capacity: int
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}
