from unittest.mock import AsyncMock, patch

import httpx
import pytest

from weatherly.models.weather.weather import WeatherResult
from weatherly.services.weather_service import WeatherService


@pytest.fixture
def london_payload():
    """Current weather payload for London as returned by OpenWeatherMap."""
    return {
        "coord": {"lon": -0.1278, "lat": 51.5074},
        "weather": [{"id": 804, "main": "Clouds", "description": "cloudy", "icon": "04d"}],
        "base": "stations",
        "main": {
            "temp": 15.2,
            "feels_like": 14.8,
            "temp_min": 12.3,
            "temp_max": 18.7,
            "pressure": 1013,
            "humidity": 80,
        },
        "visibility": 10000,
        "wind": {"speed": 3.1, "deg": 180},
        "clouds": {"all": 90},
        "dt": 1696161600,
        "sys": {"country": "GB", "sunrise": 1696138800, "sunset": 1696182000},
        "timezone": 3600,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def london_result():
    """Normalized London weather."""
    return WeatherResult(
        name="London",
        country="GB",
        temp=15,
        feels_like=15,
        humidity=80,
        wind=3.1,
        description="cloudy",
        icon="04d",
    )


@pytest.fixture
def weather_service():
    """Weather service with fixed test settings."""
    return WeatherService(
        base_url="https://api.openweathermap.org/data/2.5",
        api_key="test-weather-key",
        units="metric",
    )


@pytest.fixture
def mock_weather_service():
    """Mock weather service for testing."""
    mock_service = AsyncMock()
    mock_service.get_current_weather = AsyncMock()
    return mock_service


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield the client used inside the context manager."""
    with patch('httpx.AsyncClient') as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def make_response():
    """Factory for httpx responses bound to the weather endpoint."""
    def _make_response(status_code: int, **kwargs) -> httpx.Response:
        request = httpx.Request("GET", "https://api.openweathermap.org/data/2.5/weather")
        return httpx.Response(status_code, request=request, **kwargs)

    return _make_response
