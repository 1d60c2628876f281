from datetime import datetime, timezone

from fastapi import APIRouter

from weatherly.services.session_service import session_service

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="API Health Check")
async def get_health():
    """Basic health check endpoint."""

    return {
        "message": "Weatherly is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": "1.0.0",
        "active_sessions": len(session_service),
    }
