from typing import Optional

from weatherly.exceptions.base import WeatherlyError


class WeatherServiceError(WeatherlyError):
    """
    Base exception for weather lookup errors.

    Every lookup error carries the message shown to the user. Subclasses
    define a fixed default; it can be overridden per instance.
    """

    default_message = "Error"

    def __init__(self, message: Optional[str] = None, user_message: Optional[str] = None):
        super().__init__(message or user_message or self.default_message)
        self.user_message = user_message or self.default_message
