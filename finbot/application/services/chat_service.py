"""
Chat service for knowledge-grounded conversation with progressive profiling.

Converts API messages, runs the turn pipeline against the request's
session store and maps the outcome to the response schema.

Dependencies: finbot.core.agent, finbot.application.adapters
System role: Chat service orchestration layer
"""

import logging

from finbot.application.adapters.message_adapter import to_langchain_messages
from finbot.core.agent.orchestrator import TurnOrchestrator
from finbot.models.chat import ChatMessage, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class ChatService:
    """Chat service for one request."""

    def __init__(self, orchestrator: TurnOrchestrator) -> None:
        """
        Initialize chat service.

        Args:
            orchestrator: Turn pipeline bound to the request's profile store
        """
        self.orchestrator = orchestrator

    async def process_chat(self, request: ChatRequest) -> ChatResponse:
        """
        Process one conversational turn.

        Flow:
        1. Convert messages (system messages dropped)
        2. Run the turn pipeline (session resolve, extraction, retrieval, generation)
        3. Return the assistant reply and the session id

        Raises:
            ConfigurationError: Credentials missing
            GenerationTimeoutError: Generation exceeded its timeout
            GenerationError: Generation failed
        """
        messages = to_langchain_messages(request.messages)
        result = await self.orchestrator.process_turn(messages, session_id=request.session_id)
        logger.info(
            f"{__name__}:process_chat - session_id={result.session_id} "
            f"passages={len(result.passages)} asked={result.asked_marked}"
        )
        return ChatResponse(
            reply=ChatMessage(role="assistant", content=result.reply),
            session_id=result.session_id,
        )
