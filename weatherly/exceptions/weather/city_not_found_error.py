from weatherly.exceptions.weather.weather_service_error import WeatherServiceError


class CityNotFoundError(WeatherServiceError):
    """Exception for cities the weather API does not know (HTTP 404)."""

    default_message = "City not found"
