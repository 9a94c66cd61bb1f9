"""
Tenant endpoints. Creating a tenant is the unauthenticated bootstrap step;
everything else is scoped to the caller's tenant.
"""

from fastapi import APIRouter, Depends, status

from ticketing.core.security import get_current_tenant_id
from ticketing.schemas.tenant import TenantCreate, TenantResponse
from ticketing.services.tenant_service import create_tenant, get_tenant
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Tenants"])


@router.post("/", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
async def create_tenant_endpoint(tenant_data: TenantCreate, uow: UnitOfWork = Depends(get_unit_of_work)):
    return await create_tenant(uow, tenant_data)


@router.get("/current", response_model=TenantResponse)
async def get_current_tenant_endpoint(
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_tenant(uow, tenant_id)
