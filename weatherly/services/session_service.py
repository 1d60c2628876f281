import time
import uuid
from typing import Callable, Optional, Tuple

import structlog
from cachetools import TTLCache

from weatherly.config.config import config
from weatherly.services.lookup_service import WeatherLookup
from weatherly.services.weather_service import WeatherService, weather_service

logger = structlog.get_logger(__name__)


class SessionService:
    """
    Keeps one WeatherLookup per browser session.

    Sessions are only created on submission; reading the page does not
    create one. The registry is bounded: idle sessions expire after
    ``ttl_seconds`` and the least recently used ones are evicted beyond
    ``max_sessions``. Every access renews a session's lifetime.
    """

    def __init__(
        self,
        service: Optional[WeatherService] = None,
        max_sessions: Optional[int] = None,
        ttl_seconds: Optional[float] = None,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.service = service or weather_service
        self._lookups: TTLCache = TTLCache(
            maxsize=max_sessions or config.session_max_sessions,
            ttl=ttl_seconds or config.session_ttl_seconds,
            timer=timer,
        )

    def get(self, session_id: Optional[str]) -> Optional[WeatherLookup]:
        """Get the lookup of a live session, or None if it is unknown or expired."""
        if not session_id:
            return None

        lookup = self._lookups.get(session_id)
        if lookup is not None:
            # Re-insert to renew the expiry
            self._lookups[session_id] = lookup
        return lookup

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, WeatherLookup]:
        """
        Get the lookup for a session, creating a fresh session if needed.

        Args:
            session_id: Session id from the client cookie, if any

        Returns:
            Tuple of the (possibly new) session id and its lookup
        """
        lookup = self.get(session_id)
        if lookup is not None:
            return session_id, lookup

        new_id = uuid.uuid4().hex
        lookup = WeatherLookup(service=self.service)
        self._lookups[new_id] = lookup
        logger.info("Created lookup session", session_id=new_id, active_sessions=len(self))
        return new_id, lookup

    def __len__(self) -> int:
        self._lookups.expire()
        return len(self._lookups)


session_service = SessionService()
