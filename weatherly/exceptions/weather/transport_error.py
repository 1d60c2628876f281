from weatherly.exceptions.weather.weather_service_error import WeatherServiceError


class TransportError(WeatherServiceError):
    """
    Exception for requests that could not be completed at all.

    Covers network, DNS and timeout failures as well as response bodies that
    cannot be parsed. The underlying error's description is shown to the
    user when it has one.
    """

    def __init__(self, message: str = ""):
        super().__init__(message, user_message=message or None)
