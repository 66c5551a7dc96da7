"""Chat API endpoints.

Routes:
- POST /chat - Run one conversational turn

Dependencies: finbot.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from finbot.api.deps import get_chat_service
from finbot.application.services.chat_service import ChatService
from finbot.core.exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationTimeoutError,
)
from finbot.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Send the conversation so far and get the assistant's reply.

    A missing or unknown sessionId starts a new session; the response
    carries the id to send on the next turn.

    Args:
        request: ChatRequest with messages and optional sessionId
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Assistant reply and session id

    Raises:
        HTTPException(500): Missing configuration or processing error
        HTTPException(502): Generation provider failed
        HTTPException(504): Generation timed out
    """
    try:
        return await chat_service.process_chat(request)
    except ConfigurationError as e:
        logger.error(f"{__name__}:chat - Configuration error: {e}")
        raise HTTPException(status_code=500, detail=e.message)
    except GenerationTimeoutError as e:
        logger.error(f"{__name__}:chat - {e}")
        raise HTTPException(status_code=504, detail=e.message)
    except GenerationError as e:
        logger.error(f"{__name__}:chat - {e}")
        raise HTTPException(status_code=502, detail=e.message)
    except Exception as e:
        logger.exception(f"{__name__}:chat - {type(e).__name__}: {e}")
        raise HTTPException(status_code=500, detail=f"Chat processing failed: {str(e)}")
