import structlog
from fastapi import APIRouter, status, HTTPException, Query

from weatherly.config.config import config
from weatherly.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    CityValidationError,
    TransportError,
)
from weatherly.services.weather_service import weather_service

logger = structlog.get_logger(__name__)

# Create router
router = APIRouter(prefix="/weather", tags=["Weather"])


@router.get("/current", summary="Get Current Weather")
async def get_current_weather(
    city: str = Query(default="", description="City name, e.g. London"),
):
    """
    Look up current weather for a city straight from OpenWeatherMap.

    Args:
        city: City name to query.

    Returns:
        The normalized weather result plus the icon image URL.

    Raises:
        HTTPException: 400 for an empty city, 404 if the city is not found,
            502 when the upstream request fails.
    """
    logger.info("API request: Get current weather", city=city)
    try:
        weather_result = await weather_service.get_current_weather(city)

    except CityValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.user_message)

    except CityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.user_message)

    except (APIRequestError, TransportError) as e:
        logger.error(
            "Failed to get current weather",
            city=city,
            error=str(e)
        )
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.user_message)

    return {
        **weather_result.model_dump(),
        "icon_url": weather_result.icon_url(config.openweather_icon_base_url),
    }
