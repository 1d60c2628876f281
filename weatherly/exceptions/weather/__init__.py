from weatherly.exceptions.weather.api_request_error import APIRequestError
from weatherly.exceptions.weather.city_not_found_error import CityNotFoundError
from weatherly.exceptions.weather.city_validation_error import CityValidationError
from weatherly.exceptions.weather.transport_error import TransportError
from weatherly.exceptions.weather.weather_service_error import WeatherServiceError

__all__ = [
    "APIRequestError",
    "CityNotFoundError",
    "CityValidationError",
    "TransportError",
    "WeatherServiceError",
]
