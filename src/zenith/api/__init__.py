"""API route aggregation.

All routers registered here get mounted in main.py under /api.

Learn: No router is behind a blanket auth dependency. /auth/me is the
only route that requires a Bearer token; it declares that itself via
Depends(get_current_user).
"""

from fastapi import APIRouter

from zenith.api.auth import router as auth_router
from zenith.api.buses import router as buses_router
from zenith.api.health import router as health_router
from zenith.api.hotels import router as hotels_router
from zenith.api.tasks import router as tasks_router
from zenith.api.trains import router as trains_router

api_router = APIRouter(prefix="/api")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(auth_router, tags=["auth", "users"])
api_router.include_router(tasks_router, tags=["tasks"])
api_router.include_router(buses_router, tags=["buses"])
api_router.include_router(hotels_router, tags=["hotels"])
api_router.include_router(trains_router, tags=["trains"])
