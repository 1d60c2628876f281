from weatherly.exceptions.weather.weather_service_error import WeatherServiceError


class CityValidationError(WeatherServiceError):
    """Exception for an empty or whitespace-only city name."""

    default_message = "Please type a city name."
