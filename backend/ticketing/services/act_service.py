"""
Act service handling CRUD operations within a tenant.
"""

from ticketing.core.errors import ActNotFoundError
from ticketing.core.logging import get_logger
from ticketing.models.act import Act
from ticketing.schemas.act import ActCreate, ActUpdate
from ticketing.services.unit_of_work import UnitOfWork

logger = get_logger(__name__)


async def list_acts(uow: UnitOfWork, tenant_id: int) -> list[Act]:
    return await uow.acts.list_for_tenant(tenant_id)


async def count_acts(uow: UnitOfWork, tenant_id: int) -> int:
    return await uow.acts.count(tenant_id)


async def get_act(uow: UnitOfWork, tenant_id: int, act_id: int) -> Act:
    act = await uow.acts.get(tenant_id, act_id)
    if act is None:
        raise ActNotFoundError(act_id)
    return act


async def create_act(uow: UnitOfWork, tenant_id: int, act_data: ActCreate) -> Act:
    async with uow:
        act = await uow.acts.add(Act(tenant_id=tenant_id, name=act_data.name))
        await uow.commit()

    logger.info("act_created", act_id=act.id, tenant_id=tenant_id)
    return act


async def update_act(uow: UnitOfWork, tenant_id: int, act_id: int, act_data: ActUpdate) -> Act:
    async with uow:
        act = await uow.acts.get(tenant_id, act_id)
        if act is None:
            raise ActNotFoundError(act_id)
        act.name = act_data.name
        act = await uow.acts.save(act)
        await uow.commit()

    logger.info("act_updated", act_id=act.id, tenant_id=tenant_id)
    return act


async def delete_act(uow: UnitOfWork, tenant_id: int, act_id: int) -> None:
    async with uow:
        act = await uow.acts.get(tenant_id, act_id)
        if act is None:
            raise ActNotFoundError(act_id)
        await uow.acts.delete(act)
        await uow.commit()

    logger.info("act_deleted", act_id=act_id, tenant_id=tenant_id)
