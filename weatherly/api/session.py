from dataclasses import dataclass
from typing import Optional

from fastapi import Request, Response

from weatherly.config.config import config
from weatherly.models.lookup.lookup_state import Idle, LookupSnapshot
from weatherly.services.lookup_service import WeatherLookup
from weatherly.services.session_service import session_service


@dataclass
class LookupSession:
    """Session id and lookup of the requesting browser."""

    session_id: str
    lookup: WeatherLookup

    def attach_cookie(self, response: Response) -> Response:
        """Set the session cookie on an outgoing response."""
        response.set_cookie(
            key=config.session_cookie_name,
            value=self.session_id,
            max_age=int(config.session_ttl_seconds),
            httponly=True,
            samesite="lax",
        )
        return response


def current_lookup(request: Request) -> Optional[WeatherLookup]:
    """Dependency: the caller's live lookup, without creating a session."""
    return session_service.get(request.cookies.get(config.session_cookie_name))


def lookup_session(request: Request) -> LookupSession:
    """Dependency: the caller's session, started if it has none."""
    session_id, lookup = session_service.get_or_create(request.cookies.get(config.session_cookie_name))
    return LookupSession(session_id=session_id, lookup=lookup)


def snapshot_of(lookup: Optional[WeatherLookup]) -> LookupSnapshot:
    """Snapshot of a lookup; a browser without a session sees the initial state."""
    if lookup is None:
        return LookupSnapshot.from_state("", Idle(), config.openweather_icon_base_url)
    return lookup.snapshot()
