from fastapi import APIRouter

from weatherly.api.v1.lookup import lookup_router
from weatherly.api.v1.weather import weather_router

# Create main router
router = APIRouter(prefix="/api/v1")

# Include all sub-routers
router.include_router(lookup_router)
router.include_router(weather_router)
