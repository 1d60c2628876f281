from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field

from weatherly.api.session import LookupSession, current_lookup, lookup_session, snapshot_of
from weatherly.models.lookup.lookup_state import LookupSnapshot
from weatherly.services.lookup_service import WeatherLookup

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/lookup", tags=["Lookup"])


class LookupRequest(BaseModel):
    """Body of a lookup submission."""

    city: str = Field(default="", description="City name as typed by the user")


@router.get("", summary="Get Lookup State", response_model=LookupSnapshot)
async def get_lookup(lookup: Optional[WeatherLookup] = Depends(current_lookup)):
    """Return the lookup state of the calling session (initial state if it has none)."""
    return snapshot_of(lookup)


@router.post("", summary="Submit Lookup", response_model=LookupSnapshot)
async def submit_lookup(
    body: LookupRequest,
    response: Response,
    session: LookupSession = Depends(lookup_session),
):
    """
    Submit a city for the calling session and wait for the outcome.

    Starts a session when the caller has none. Lookup failures are part of
    the returned state (``error``), so this endpoint answers 200 for them.
    """
    session.attach_cookie(response)

    logger.info("API request: Submit lookup", session_id=session.session_id, city=body.city)
    return await session.lookup.submit(body.city)


@router.delete("", summary="Reset Lookup", response_model=LookupSnapshot)
async def reset_lookup(lookup: Optional[WeatherLookup] = Depends(current_lookup)):
    """Clear the query, error and result of the calling session."""
    if lookup is None:
        return snapshot_of(None)

    logger.info("API request: Reset lookup")
    return lookup.reset()
