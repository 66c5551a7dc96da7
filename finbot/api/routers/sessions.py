"""
Session API endpoints.

Routes:
- GET /session/{session_id} - Get the collected profile of a session

Dependencies: finbot.application.services.session_service, finbot.models
System role: Session lookup HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from finbot.api.deps import get_session_service
from finbot.application.services.session_service import SessionService
from finbot.core.exceptions import SessionNotFoundError
from finbot.models.session import SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["sessions"])


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Get session by ID.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Retrieval failed
    """
    try:
        profile = await session_service.lookup(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except Exception as e:
        logger.exception(f"{__name__}:get_session - {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve session: {str(e)}")

    return SessionResponse(
        id=profile.id,
        name=profile.name,
        email=profile.email,
        income=profile.income,
        created_at=profile.created_at_ms,
    )
