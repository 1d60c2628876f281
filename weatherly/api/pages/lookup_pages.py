"""
Page routes for the lookup form
"""
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from weatherly.api.session import LookupSession, current_lookup, lookup_session, snapshot_of
from weatherly.services.lookup_service import WeatherLookup
from weatherly.utils.templates import render_template

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request, lookup: Optional[WeatherLookup] = Depends(current_lookup)):
    """Lookup page: form, error banner and result card or placeholder"""
    return render_template("index.html", {"lookup": snapshot_of(lookup)}, request)


@router.post("/lookup", include_in_schema=False)
async def submit(city: str = Form(default=""), session: LookupSession = Depends(lookup_session)):
    """Form submission; the page is re-rendered through a redirect"""
    logger.info("Page lookup submitted", session_id=session.session_id, city=city)

    await session.lookup.submit(city)

    response = RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
    return session.attach_cookie(response)


@router.post("/reset", include_in_schema=False)
async def reset(lookup: Optional[WeatherLookup] = Depends(current_lookup)):
    """Clear button"""
    if lookup is not None:
        lookup.reset()

    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
