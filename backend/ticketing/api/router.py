"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from ticketing.api.routes import auth, tenants, venues, acts, shows, ticket_offers, ticket_sales

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(tenants.router)
api_router.include_router(venues.router)
api_router.include_router(acts.router)
api_router.include_router(shows.router)
api_router.include_router(ticket_offers.router)
api_router.include_router(ticket_sales.router)
