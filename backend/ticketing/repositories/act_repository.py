from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ticketing.models.act import Act


class ActRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, tenant_id: int, act_id: int) -> Optional[Act]:
        result = await self.session.execute(
            select(Act).where(Act.id == act_id, Act.tenant_id == tenant_id)
        )
        return result.scalar_one_or_none()

    async def list_for_tenant(self, tenant_id: int) -> list[Act]:
        result = await self.session.execute(
            select(Act).where(Act.tenant_id == tenant_id).order_by(Act.name.asc(), Act.id.asc())
        )
        return list(result.scalars().all())

    async def count(self, tenant_id: int) -> int:
        result = await self.session.execute(
            select(func.count(Act.id)).where(Act.tenant_id == tenant_id)
        )
        return result.scalar_one()

    async def add(self, act: Act) -> Act:
        self.session.add(act)
        await self.session.flush()
        await self.session.refresh(act)
        return act

    async def save(self, act: Act) -> Act:
        await self.session.flush()
        await self.session.refresh(act)
        return act

    async def delete(self, act: Act) -> None:
        await self.session.delete(act)
        await self.session.flush()
