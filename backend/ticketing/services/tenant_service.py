"""
Tenant service: tenant bootstrap and lookup.
"""

from ticketing.core.errors import AlreadyExistsError, TenantNotFoundError
from ticketing.core.logging import get_logger
from ticketing.models.tenant import Tenant
from ticketing.schemas.tenant import TenantCreate
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)


async def create_tenant(uow: UnitOfWork, tenant_data: TenantCreate) -> Tenant:
    """Create a tenant. Raises 409 if the identifier or slug is taken."""
    async with uow:
        if await uow.tenants.exists_with_identifier_or_slug(tenant_data.tenant_identifier, tenant_data.slug):
            logger.warning("tenant_create_failed", reason="duplicate", slug=tenant_data.slug)
            raise AlreadyExistsError("Tenant identifier or slug already exists")

        tenant = await uow.tenants.add(
            Tenant(
                tenant_identifier=tenant_data.tenant_identifier,
                name=tenant_data.name,
                slug=tenant_data.slug,
            )
        )
        await uow.commit()

    logger.info("tenant_created", tenant_id=tenant.id, slug=tenant.slug)
    return tenant


async def get_tenant(uow: UnitOfWork, tenant_id: int) -> Tenant:
    tenant = await uow.tenants.get(tenant_id)
    if tenant is None:
        raise TenantNotFoundError(tenant_id)
    return tenant
