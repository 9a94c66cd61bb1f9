"""
Authentication service handling user registration and login.
"""

from ticketing.core.errors import AlreadyExistsError, AuthenticationError, ForbiddenError, InvalidArgumentError
from ticketing.core.logging import get_logger
from ticketing.core.security import create_access_token, hash_password, verify_password
from ticketing.models.user import User
from ticketing.schemas.user import UserCreate, UserLogin
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)


async def register_user(uow: UnitOfWork, user_data: UserCreate) -> User:
    """
    Register a new user in an existing, active tenant.
    Raises 409 if the username already exists.
    """
    async with uow:
        tenant = await uow.tenants.get(user_data.tenant_id)
        if tenant is None or not tenant.is_active:
            logger.warning("registration_failed", reason="unknown_tenant", tenant_id=user_data.tenant_id)
            raise InvalidArgumentError("tenant_id", "Unknown or inactive tenant")

        if await uow.users.get_by_username(user_data.username):
            logger.warning("registration_failed", reason="username_exists", username=user_data.username)
            raise AlreadyExistsError("Username already taken")

        user = await uow.users.add(
            User(
                tenant_id=tenant.id,
                username=user_data.username,
                hashed_password=hash_password(user_data.password),
            )
        )
        await uow.commit()

    logger.info("user_registered", user_id=user.id, tenant_id=user.tenant_id)
    return user


async def authenticate_user(uow: UnitOfWork, login_data: UserLogin) -> str:
    """
    Authenticate user and return a JWT access token carrying the tenant id.
    Raises 401 if credentials are invalid.
    """
    user = await uow.users.get_by_username(login_data.username)

    if not user or not verify_password(login_data.password, user.hashed_password):
        logger.warning("login_failed", username=login_data.username)
        raise AuthenticationError()

    if not user.is_active:
        raise ForbiddenError("Account is deactivated")

    token = create_access_token(
        data={"sub": str(user.id), "tenant_id": user.tenant_id, "username": user.username}
    )
    logger.info("user_logged_in", user_id=user.id, tenant_id=user.tenant_id)
    return token
