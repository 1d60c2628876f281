from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from weatherly.models.weather.weather import WeatherResult


class Idle(BaseModel):
    """Nothing submitted yet, or cleared by a reset."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A lookup request is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    request_id: int = Field(..., ge=1, description="Sequence number of the in-flight request")


class Success(BaseModel):
    """The last lookup produced a result."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    result: WeatherResult


class Failure(BaseModel):
    """The last lookup (or its validation) failed."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    message: str


LookupState = Union[Idle, Loading, Success, Failure]


class LookupSnapshot(BaseModel):
    """Read-only view of a lookup for rendering and the JSON API."""

    query: str = Field("", description="Current city input")
    status: str = Field(..., description="idle, loading, success or failure")
    loading: bool = Field(False, description="True while a request is in flight")
    error: Optional[str] = Field(None, description="Message of the last failed attempt")
    weather: Optional[WeatherResult] = Field(None, description="Result of the last successful attempt")
    icon_url: Optional[str] = Field(None, description="Icon image URL for the result")

    @classmethod
    def from_state(
        cls, query: str, state: LookupState, icon_base_url: str
    ) -> "LookupSnapshot":
        weather = state.result if isinstance(state, Success) else None
        return cls(
            query=query,
            status=state.status,
            loading=isinstance(state, Loading),
            error=state.message if isinstance(state, Failure) else None,
            weather=weather,
            icon_url=weather.icon_url(icon_base_url) if weather else None,
        )
