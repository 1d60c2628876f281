from typing import Optional

from weatherly.exceptions.weather.weather_service_error import WeatherServiceError


class APIRequestError(WeatherServiceError):
    """Exception for non-success responses from the weather API."""

    default_message = "Failed to fetch weather"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
