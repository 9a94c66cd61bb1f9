"""
Pydantic schemas for act-related request/response validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ActCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class ActUpdate(ActCreate):
    pass


class ActResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class ActCountResponse(BaseModel):
    count: int
