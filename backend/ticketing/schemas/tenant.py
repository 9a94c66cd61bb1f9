"""
Pydantic schemas for tenant-related request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class TenantCreate(BaseModel):
    tenant_identifier: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-z0-9-]+$")


class TenantResponse(BaseModel):
    id: int
    tenant_identifier: str
    name: str
    slug: str
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}
