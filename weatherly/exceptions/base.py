class WeatherlyError(Exception):
    """Base exception for all Weatherly errors."""

    pass
