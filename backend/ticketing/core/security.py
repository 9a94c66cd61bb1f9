"""
Password hashing and JWT handling.

Access tokens carry the user id in `sub` and the user's tenant in
`tenant_id`. Routes receive the tenant explicitly through the
`get_current_tenant_id` dependency and pass it down to services.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from ticketing.core.config import get_settings
from ticketing.core.errors import AuthenticationError

settings = get_settings()

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    user_id: int
    tenant_id: int
    username: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Principal:
    if credentials is None:
        raise AuthenticationError("Not authenticated")

    try:
        payload = jwt.decode(
            credentials.credentials, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        user_id = int(payload["sub"])
        tenant_id = int(payload["tenant_id"])
    except (JWTError, KeyError, TypeError, ValueError):
        raise AuthenticationError("Invalid or expired token")

    structlog.contextvars.bind_contextvars(tenant_id=tenant_id, user_id=user_id)
    return Principal(user_id=user_id, tenant_id=tenant_id, username=payload.get("username", ""))


async def get_current_user_id(principal: Principal = Depends(get_current_principal)) -> int:
    return principal.user_id


async def get_current_tenant_id(principal: Principal = Depends(get_current_principal)) -> int:
    return principal.tenant_id
