import asyncio
import itertools
from typing import Optional

import structlog

from weatherly.config.config import config
from weatherly.exceptions.weather import CityValidationError, WeatherServiceError
from weatherly.models.lookup.lookup_state import (
    Failure,
    Idle,
    Loading,
    LookupSnapshot,
    LookupState,
    Success,
)
from weatherly.models.weather.weather import WeatherResult
from weatherly.services.weather_service import WeatherService, weather_service

logger = structlog.get_logger(__name__)

CANCELLED_MESSAGE = "Lookup cancelled. Please try again."


class WeatherLookup:
    """
    State machine behind a single weather lookup form.

    Holds the query text and one tagged state (Idle, Loading, Success or
    Failure). Transitions happen on submit, on request resolution and on
    reset, all on the event loop thread, so no locking is needed.

    Overlapping submissions are ordered by a request id: a resolution is
    applied only while the lookup is still waiting on that same request, so
    the latest submission always wins over an older one that resolves late.
    """

    def __init__(self, service: Optional[WeatherService] = None, icon_base_url: Optional[str] = None):
        self.service = service or weather_service
        self.icon_base_url = icon_base_url or config.openweather_icon_base_url
        self.query: str = ""
        self.state: LookupState = Idle()
        self._request_ids = itertools.count(1)

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def error(self) -> Optional[str]:
        return self.state.message if isinstance(self.state, Failure) else None

    @property
    def weather(self) -> Optional[WeatherResult]:
        return self.state.result if isinstance(self.state, Success) else None

    def set_query(self, query: str):
        self.query = query

    async def submit(self, query: Optional[str] = None) -> LookupSnapshot:
        """
        Submit the current query (or ``query``, which replaces it first).

        Empty input fails immediately without touching the network. Otherwise
        the lookup enters Loading, awaits the weather service and settles on
        Success or Failure. A cancelled request settles as Failure before the
        cancellation propagates.

        Returns:
            Snapshot of the lookup after this submission settled
        """
        if query is not None:
            self.set_query(query)

        if not self.query.strip():
            self.state = Failure(message=CityValidationError.default_message)
            logger.info("Rejected empty city input")
            return self.snapshot()

        request_id = next(self._request_ids)
        self.state = Loading(request_id=request_id)
        logger.info("Lookup started", city=self.query, request_id=request_id)

        try:
            result = await self.service.get_current_weather(self.query)
        except asyncio.CancelledError:
            logger.warning("Lookup cancelled", city=self.query, request_id=request_id)
            self._resolve(request_id, Failure(message=CANCELLED_MESSAGE))
            raise
        except WeatherServiceError as e:
            self._resolve(request_id, Failure(message=e.user_message))
        except Exception as e:
            logger.error("Unexpected lookup failure", city=self.query, error=str(e), exc_info=True)
            self._resolve(request_id, Failure(message=str(e) or WeatherServiceError.default_message))
        else:
            self._resolve(request_id, Success(result=result))

        return self.snapshot()

    def _resolve(self, request_id: int, outcome: LookupState):
        """Apply an outcome if the lookup is still waiting on ``request_id``."""
        if not isinstance(self.state, Loading) or self.state.request_id != request_id:
            logger.info(
                "Discarding stale lookup result",
                request_id=request_id,
                outcome=outcome.status,
                current_status=self.state.status,
            )
            return

        self.state = outcome
        logger.info("Lookup finished", request_id=request_id, outcome=outcome.status)

    def reset(self) -> LookupSnapshot:
        """Clear the query, error and result. An in-flight request keeps loading."""
        self.query = ""
        if not isinstance(self.state, Loading):
            self.state = Idle()
        return self.snapshot()

    def snapshot(self) -> LookupSnapshot:
        return LookupSnapshot.from_state(self.query, self.state, self.icon_base_url)
