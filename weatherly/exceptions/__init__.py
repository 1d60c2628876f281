from weatherly.exceptions.base import WeatherlyError
from weatherly.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    CityValidationError,
    TransportError,
    WeatherServiceError,
)

__all__ = [
    "WeatherlyError",
    "APIRequestError",
    "CityNotFoundError",
    "CityValidationError",
    "TransportError",
    "WeatherServiceError",
]
