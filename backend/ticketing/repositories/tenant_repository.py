from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models.tenant import Tenant


class TenantRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, tenant_id: int) -> Optional[Tenant]:
        result = await self.session.execute(select(Tenant).where(Tenant.id == tenant_id))
        return result.scalar_one_or_none()

    async def exists_with_identifier_or_slug(self, tenant_identifier: str, slug: str) -> bool:
        result = await self.session.execute(
            select(Tenant.id).where(
                or_(Tenant.tenant_identifier == tenant_identifier, Tenant.slug == slug)
            )
        )
        return result.first() is not None

    async def add(self, tenant: Tenant) -> Tenant:
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
