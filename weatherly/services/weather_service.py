from typing import Any, Dict, Optional

import httpx
import structlog
from pydantic import ValidationError

from weatherly.config.config import config
from weatherly.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    CityValidationError,
    TransportError,
)
from weatherly.models.weather.weather import OpenWeatherMapResponse, WeatherResult

logger = structlog.get_logger(__name__)


class WeatherService:
    """
    Service for looking up current weather from the OpenWeatherMap API.

    Issues exactly one GET request per lookup. There is no retry and no
    caching; every failure is mapped onto the lookup error taxonomy and
    left to the caller.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        units: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the weather service, falling back to the application config."""
        self.base_url = (base_url or config.openweather_base_url).rstrip("/")
        self.api_key = config.openweather_api_key if api_key is None else api_key
        self.units = units or config.openweather_units

        # None disables the timeout entirely
        self.timeout = httpx.Timeout(timeout if timeout is not None else config.openweather_timeout)

        if not self.api_key:
            logger.warning("OpenWeatherMap API key is not configured")

    @property
    def weather_url(self) -> str:
        return f"{self.base_url}/weather"

    async def _make_request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Make a single HTTP request to the OpenWeatherMap current weather endpoint.

        Args:
            params: Query parameters

        Returns:
            Parsed JSON response from the API

        Raises:
            CityNotFoundError: If the city is not found (404)
            APIRequestError: For any other non-success status
            TransportError: If the request fails or the body is not JSON
        """
        # Add API key to parameters
        params["units"] = self.units
        params["appid"] = self.api_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                logger.info(
                    "Making API request",
                    url=self.weather_url,
                    city=params.get("q"),
                    units=self.units,
                )

                response = await client.get(self.weather_url, params=params)

        except httpx.TimeoutException as e:
            logger.warning("Request timeout", error=str(e))
            raise TransportError(str(e))

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Request error", error=str(e))
            raise TransportError(str(e))

        if response.status_code == 404:
            logger.info("City not found", city=params.get("q"))
            raise CityNotFoundError(f"Invalid city or request: {response.text}")

        if not response.is_success:
            logger.warning(
                "API request failed",
                status_code=response.status_code,
                response_text=response.text,
            )
            raise APIRequestError(
                f"Weather API returned status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error("Weather API returned a malformed body", error=str(e))
            raise TransportError(str(e))

    async def get_current_weather(self, city: str) -> WeatherResult:
        """
        Get normalized current weather for a city.

        Args:
            city: Name of the city, sent as typed

        Returns:
            WeatherResult with the display fields

        Raises:
            CityValidationError: If the city name is empty or whitespace
            CityNotFoundError: If the city is not found
            APIRequestError: For other API errors
            TransportError: If the request could not be completed or parsed
        """
        if not city or not city.strip():
            raise CityValidationError()

        logger.info("Fetching current weather", city=city)
        data = await self._make_request({"q": city})

        if not isinstance(data, dict):
            logger.error("Unexpected weather payload", city=city, payload_type=type(data).__name__)
            raise TransportError(f"Invalid weather data received for {city}")

        try:
            response = OpenWeatherMapResponse(**data)
        except ValidationError as e:
            logger.error("Failed to parse weather data", city=city, error=str(e))
            raise TransportError(f"Invalid weather data received for {city}: {str(e)}")

        weather_result = WeatherResult.from_openweather_response(response)

        logger.info(
            "Successfully fetched current weather",
            city=city,
            location=weather_result.name,
            temperature=weather_result.temp,
        )
        return weather_result


weather_service = WeatherService()
