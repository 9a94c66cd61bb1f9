"""
Act endpoints, including scheduling shows for an act.
"""

from fastapi import APIRouter, Depends, Response, status

from ticketing.core.security import get_current_tenant_id
from ticketing.schemas.act import ActCountResponse, ActCreate, ActResponse, ActUpdate
from ticketing.schemas.show import ShowCreate, ShowResponse
from ticketing.services import act_service, show_service
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

router = APIRouter(prefix="/acts", tags=["Acts"])


@router.get("/", response_model=list[ActResponse])
async def list_acts_endpoint(
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await act_service.list_acts(uow, tenant_id)


@router.get("/count", response_model=ActCountResponse)
async def count_acts_endpoint(
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return ActCountResponse(count=await act_service.count_acts(uow, tenant_id))


@router.post("/", response_model=ActResponse, status_code=status.HTTP_201_CREATED)
async def create_act_endpoint(
    act_data: ActCreate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await act_service.create_act(uow, tenant_id, act_data)


@router.get("/{act_id}", response_model=ActResponse)
async def get_act_endpoint(
    act_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await act_service.get_act(uow, tenant_id, act_id)


@router.put("/{act_id}", response_model=ActResponse)
async def update_act_endpoint(
    act_id: int,
    act_data: ActUpdate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await act_service.update_act(uow, tenant_id, act_id, act_data)


@router.delete("/{act_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_act_endpoint(
    act_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    await act_service.delete_act(uow, tenant_id, act_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{act_id}/shows", response_model=list[ShowResponse])
async def list_act_shows_endpoint(
    act_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    shows = await show_service.list_shows_for_act(uow, tenant_id, act_id)
    return [show_service.to_response(s) for s in shows]


@router.post("/{act_id}/shows", response_model=ShowResponse, status_code=status.HTTP_201_CREATED)
async def create_show_endpoint(
    act_id: int,
    show_data: ShowCreate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    show = await show_service.create_show(uow, tenant_id, act_id, show_data)
    return show_service.to_response(show)
