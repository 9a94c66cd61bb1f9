"""
Authentication endpoints: register, login and current user.
"""

from fastapi import APIRouter, Depends, status

from ticketing.core.security import Principal, get_current_principal
from ticketing.schemas.user import CurrentUserResponse, UserCreate, UserResponse, UserLogin, Token
from ticketing.services.auth_service import register_user, authenticate_user
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Register a new user account inside a tenant."""
    return await register_user(uow, user_data)


@router.post("/login", response_model=Token)
async def login(login_data: UserLogin, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Authenticate and receive a JWT access token scoped to the user's tenant."""
    token = await authenticate_user(uow, login_data)
    return Token(access_token=token)


@router.get("/me", response_model=CurrentUserResponse)
async def me(principal: Principal = Depends(get_current_principal)):
    return CurrentUserResponse(username=principal.username, tenant_id=principal.tenant_id)
