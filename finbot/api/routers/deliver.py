"""
Delivery API endpoints.

Routes:
- POST /deliver - Send a session's collected profile by email or to the outbox

Dependencies: finbot.application.services.delivery_service
System role: Session hand-off HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from finbot.api.deps import get_delivery_service
from finbot.application.services.delivery_service import DeliveryService
from finbot.core.exceptions import SessionNotFoundError
from finbot.models.delivery import DeliverRequest, DeliveryResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["delivery"])


@router.post("/deliver", response_model=DeliveryResult, response_model_exclude_none=True)
async def deliver(
    request: DeliverRequest,
    delivery_service: DeliveryService = Depends(get_delivery_service),
) -> DeliveryResult:
    """
    Deliver a session's profile.

    Transport failures are reported in the body with ``ok: false``.

    Raises:
        HTTPException(404): Session not found
        HTTPException(500): Unexpected failure
    """
    try:
        return await delivery_service.deliver(request.session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")
    except Exception as e:
        logger.exception(f"{__name__}:deliver - {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Delivery failed: {str(e)}")
