from unittest.mock import AsyncMock, patch

import httpx
import pytest

from weatherly.exceptions.weather import (
    APIRequestError,
    CityNotFoundError,
    CityValidationError,
    TransportError,
)
from weatherly.models.weather.weather import WeatherResult


class TestWeatherService:
    """Test cases for the WeatherService class."""

    @pytest.mark.asyncio
    async def test_make_request_success(self, weather_service, mock_http_client, make_response):
        """Test successful API request."""
        mock_http_client.get.return_value = make_response(200, json={"name": "London"})

        result = await weather_service._make_request({"q": "London"})

        assert result == {"name": "London"}
        mock_http_client.get.assert_called_once()
        call_args = mock_http_client.get.call_args
        assert call_args[0][0] == "https://api.openweathermap.org/data/2.5/weather"
        assert call_args[1]["params"]["q"] == "London"
        assert call_args[1]["params"]["appid"] == "test-weather-key"
        assert call_args[1]["params"]["units"] == "metric"

    @pytest.mark.asyncio
    async def test_make_request_city_not_found(self, weather_service, mock_http_client, make_response):
        """Test API request with 404 response."""
        mock_http_client.get.return_value = make_response(
            404, json={"cod": "404", "message": "city not found"}
        )

        with pytest.raises(CityNotFoundError) as exc_info:
            await weather_service._make_request({"q": "Atlantis"})

        assert exc_info.value.user_message == "City not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 429, 500, 503])
    async def test_make_request_other_failure(
        self, weather_service, mock_http_client, make_response, status_code
    ):
        """Test API request with any other non-success status."""
        mock_http_client.get.return_value = make_response(status_code, text="nope")

        with pytest.raises(APIRequestError) as exc_info:
            await weather_service._make_request({"q": "London"})

        assert exc_info.value.status_code == status_code
        assert exc_info.value.user_message == "Failed to fetch weather"

    @pytest.mark.asyncio
    async def test_make_request_is_not_retried(self, weather_service, mock_http_client):
        """Test that a failing request is issued exactly once."""
        mock_http_client.get.side_effect = httpx.ConnectError("Connection refused")

        with pytest.raises(TransportError) as exc_info:
            await weather_service._make_request({"q": "London"})

        assert exc_info.value.user_message == "Connection refused"
        assert mock_http_client.get.call_count == 1

    @pytest.mark.asyncio
    async def test_make_request_timeout(self, weather_service, mock_http_client):
        """Test API request that times out."""
        mock_http_client.get.side_effect = httpx.ReadTimeout("Read timed out")

        with pytest.raises(TransportError, match="Read timed out"):
            await weather_service._make_request({"q": "London"})

    @pytest.mark.asyncio
    async def test_make_request_error_without_message(self, weather_service, mock_http_client):
        """Test transport failure without a description falls back to a generic message."""
        mock_http_client.get.side_effect = httpx.ConnectError("")

        with pytest.raises(TransportError) as exc_info:
            await weather_service._make_request({"q": "London"})

        assert exc_info.value.user_message == "Error"

    @pytest.mark.asyncio
    async def test_make_request_malformed_body(self, weather_service, mock_http_client, make_response):
        """Test a success status with a body that is not JSON."""
        mock_http_client.get.return_value = make_response(200, text="<html>oops</html>")

        with pytest.raises(TransportError):
            await weather_service._make_request({"q": "London"})

    @pytest.mark.asyncio
    async def test_get_current_weather_success(self, weather_service, london_payload):
        """Test successful current weather fetch."""
        with patch.object(weather_service, '_make_request', new_callable=AsyncMock) as mock_make_request:
            mock_make_request.return_value = london_payload

            result = await weather_service.get_current_weather("London")

            assert isinstance(result, WeatherResult)
            assert result.name == "London"
            assert result.temp == 15
            assert result.humidity == 80
            assert result.description == "cloudy"

            mock_make_request.assert_called_once_with({"q": "London"})

    @pytest.mark.asyncio
    async def test_get_current_weather_sends_city_as_typed(self, weather_service, mock_http_client, make_response):
        """Test the city is passed through untouched and URL encoded by httpx."""
        mock_http_client.get.return_value = make_response(200, json={"name": "São Paulo"})

        result = await weather_service.get_current_weather("São Paulo")

        assert result.name == "São Paulo"
        assert mock_http_client.get.call_args[1]["params"]["q"] == "São Paulo"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("city", ["", "   ", "\t\n"])
    async def test_get_current_weather_empty_city(self, weather_service, city):
        """Test that an empty city never reaches the network."""
        with patch.object(weather_service, '_make_request', new_callable=AsyncMock) as mock_make_request:
            with pytest.raises(CityValidationError) as exc_info:
                await weather_service.get_current_weather(city)

            assert exc_info.value.user_message == "Please type a city name."
            mock_make_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_current_weather_partial_payload(self, weather_service):
        """Test that a payload with only a name still normalizes."""
        with patch.object(weather_service, '_make_request', new_callable=AsyncMock) as mock_make_request:
            mock_make_request.return_value = {"name": "Nowhere"}

            result = await weather_service.get_current_weather("Nowhere")

            assert result == WeatherResult(name="Nowhere")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [["not", "an", "object"], {"main": "warm"}, {"weather": "sunny"}])
    async def test_get_current_weather_invalid_payload(self, weather_service, payload):
        """Test current weather fetch with a malformed API response."""
        with patch.object(weather_service, '_make_request', new_callable=AsyncMock) as mock_make_request:
            mock_make_request.return_value = payload

            with pytest.raises(TransportError, match="Invalid weather data received"):
                await weather_service.get_current_weather("London")
