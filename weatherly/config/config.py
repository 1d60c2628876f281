from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    Covers the OpenWeatherMap endpoint and key, the web server binding,
    browser session handling and logging.
    """

    # OpenWeatherMap Configuration
    openweather_api_key: str = Field(default="", description="OpenWeatherMap API key (appid)")
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5",
        description="OpenWeatherMap API base URL",
    )
    openweather_icon_base_url: str = Field(
        default="https://openweathermap.org",
        description="Base URL for weather condition icons",
    )
    openweather_units: str = Field(default="metric", description="Temperature units (metric/imperial)")
    openweather_timeout: Optional[float] = Field(
        default=None, gt=0, description="Upstream request timeout in seconds (unset = no timeout)"
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")

    # Session Configuration
    session_cookie_name: str = Field(
        default="weatherly_session", description="Cookie holding the browser session id"
    )
    session_ttl_seconds: float = Field(
        default=3600, gt=0, description="Idle time after which a lookup session expires"
    )
    session_max_sessions: int = Field(
        default=10000, ge=1, description="Maximum number of lookup sessions kept in memory"
    )

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")

    @field_validator("openweather_base_url", "openweather_icon_base_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        """Validate log format."""
        valid_formats = ["json", "text"]
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


config = Config()
