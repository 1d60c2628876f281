from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class WeatherCondition(BaseModel):
    """Weather condition details."""

    id: Optional[int] = Field(None, description="Weather condition ID")
    main: Optional[str] = Field(None, description="Main weather condition (e.g., Rain, Snow, Clear)")
    description: Optional[str] = Field(None, description="Detailed weather description")
    icon: Optional[str] = Field(None, description="Weather icon code")


class MainWeatherData(BaseModel):
    """Main weather measurements."""

    temp: Optional[float] = Field(None, allow_inf_nan=False, description="Current temperature")
    feels_like: Optional[float] = Field(
        None, allow_inf_nan=False, description="Human perception of temperature"
    )
    humidity: Optional[Union[int, float]] = Field(None, description="Humidity percentage")


class WindData(BaseModel):
    """Wind information."""

    speed: Optional[float] = Field(None, description="Wind speed in m/s")


class SystemData(BaseModel):
    """System information from API response."""

    country: Optional[str] = Field(None, description="Country code (e.g., US, GB)")


class OpenWeatherMapResponse(BaseModel):
    """
    Current weather payload from the OpenWeatherMap API.

    Only the fields the lookup displays are modelled and every one of them
    may be missing. Present fields must still have the expected shape.
    """

    name: Optional[str] = Field(None, description="City name")
    sys: Optional[SystemData] = Field(None, description="System information")
    main: Optional[MainWeatherData] = Field(None, description="Main weather data")
    wind: Optional[WindData] = Field(None, description="Wind information")
    weather: Optional[List[Optional[WeatherCondition]]] = Field(None, description="Weather conditions")


def round_temperature(value: Optional[float]) -> Optional[int]:
    """Round to the nearest whole degree, halves away from zero. None stays None."""
    if value is None:
        return None
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class WeatherResult(BaseModel):
    """Normalized current weather shown on the result card."""

    name: Optional[str] = Field(None, description="Location name")
    country: Optional[str] = Field(None, description="Country code")
    temp: Optional[int] = Field(None, description="Temperature in Celsius, rounded")
    feels_like: Optional[int] = Field(None, description="Feels like temperature in Celsius, rounded")
    humidity: Optional[Union[int, float]] = Field(None, description="Humidity percentage")
    wind: Optional[float] = Field(None, description="Wind speed in m/s")
    description: Optional[str] = Field(None, description="Weather description")
    icon: Optional[str] = Field(None, description="Weather icon code")

    def icon_url(self, icon_base_url: str) -> Optional[str]:
        """Build the hosted icon image URL, or None when there is no icon."""
        if not self.icon:
            return None
        return f"{icon_base_url.rstrip('/')}/img/wn/{self.icon}@2x.png"

    @classmethod
    def from_openweather_response(cls, response: OpenWeatherMapResponse) -> "WeatherResult":
        """
        Create a WeatherResult from an OpenWeatherMap API response.

        Args:
            response: OpenWeatherMap API response

        Returns:
            WeatherResult: Normalized weather, with absent source fields left empty
        """
        conditions = [condition for condition in response.weather or [] if condition is not None]
        primary_weather = conditions[0] if conditions else None
        main = response.main

        return cls(
            name=response.name,
            country=response.sys.country if response.sys else None,
            temp=round_temperature(main.temp) if main else None,
            feels_like=round_temperature(main.feels_like) if main else None,
            humidity=main.humidity if main else None,
            wind=response.wind.speed if response.wind else None,
            description=primary_weather.description if primary_weather else None,
            icon=primary_weather.icon if primary_weather else None,
        )
