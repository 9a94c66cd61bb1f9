"""
Pydantic schemas for user-related request/response validation.
"""

from datetime import datetime
from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    tenant_id: int = Field(..., gt=0)
    username: str = Field(..., min_length=3, max_length=100, pattern=r"^[a-zA-Z0-9_.@-]+$")
    password: str = Field(..., min_length=8, max_length=128)


class UserLogin(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: int
    tenant_id: int
    username: str
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class CurrentUserResponse(BaseModel):
    username: str
    tenant_id: int
    is_authenticated: bool = True


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
