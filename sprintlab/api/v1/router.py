"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from sprintlab.api.v1.endpoints import (
    activities,
    analytics,
    athletes,
    events,
    prescriptions,
    tools,
    wellness,
)

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    athletes.router, prefix="/athletes", tags=["Athletes"]
)
api_router.include_router(
    activities.router,
    prefix="/athletes/{athlete_id}/activities",
    tags=["Activities"],
)
api_router.include_router(
    wellness.router,
    prefix="/athletes/{athlete_id}/wellness",
    tags=["Wellness"],
)
api_router.include_router(
    events.router,
    prefix="/athletes/{athlete_id}/events",
    tags=["Race events"],
)
api_router.include_router(
    analytics.router,
    prefix="/athletes/{athlete_id}/analytics",
    tags=["Analytics"],
)
api_router.include_router(
    prescriptions.router,
    prefix="/athletes/{athlete_id}/prescriptions",
    tags=["Prescriptions"],
)
api_router.include_router(
    tools.router, prefix="/tools", tags=["Tools"]
)
