"""
Venue endpoints. The list is cached in Redis per tenant.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response, status

from ticketing.core.logging import get_logger
from ticketing.core.security import get_current_tenant_id
from ticketing.schemas.show import NearbyShowsResponse
from ticketing.schemas.venue import VenueCreate, VenueResponse, VenueUpdate
from ticketing.services import venue_service
from ticketing.services.cache_service import get_cached_venues, invalidate_venue_cache, set_cached_venues
from ticketing.services.show_service import get_nearby_shows
from ticketing.services.unit_of_work import UnitOfWork, get_unit_of_work

logger = get_logger(__name__)
router = APIRouter(prefix="/venues", tags=["Venues"])


@router.get("/", response_model=list[VenueResponse])
async def list_venues_endpoint(
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    cached = await get_cached_venues(tenant_id)
    if cached is not None:
        logger.info("venues_list_cache_hit", tenant_id=tenant_id)
        return [VenueResponse(**v) for v in cached]

    venues = await venue_service.list_venues(uow, tenant_id)
    response_data = [VenueResponse.model_validate(v) for v in venues]
    await set_cached_venues(tenant_id, [v.model_dump(mode="json") for v in response_data])
    return response_data


@router.post("/", response_model=VenueResponse, status_code=status.HTTP_201_CREATED)
async def create_venue_endpoint(
    venue_data: VenueCreate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    venue = await venue_service.create_venue(uow, tenant_id, venue_data)
    await invalidate_venue_cache(tenant_id)
    return venue


@router.get("/{venue_id}", response_model=VenueResponse)
async def get_venue_endpoint(
    venue_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await venue_service.get_venue(uow, tenant_id, venue_id)


@router.put("/{venue_id}", response_model=VenueResponse)
async def update_venue_endpoint(
    venue_id: int,
    venue_data: VenueUpdate,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    venue = await venue_service.update_venue(uow, tenant_id, venue_id, venue_data)
    await invalidate_venue_cache(tenant_id)
    return venue


@router.delete("/{venue_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_venue_endpoint(
    venue_id: int,
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    await venue_service.delete_venue(uow, tenant_id, venue_id)
    await invalidate_venue_cache(tenant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{venue_id}/nearby-shows", response_model=NearbyShowsResponse)
async def nearby_shows_endpoint(
    venue_id: int,
    start_time: datetime = Query(...),
    tenant_id: int = Depends(get_current_tenant_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Shows at this venue within 48 hours of `start_time`, to spot scheduling clashes."""
    return await get_nearby_shows(uow, tenant_id, venue_id, start_time)
