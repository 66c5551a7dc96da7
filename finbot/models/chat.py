"""
Chat domain models and schemas.

Request/response schemas for the chat endpoint.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MessageRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """Single chat message."""

    role: MessageRole = Field(description="Message role: 'system', 'user' or 'assistant'")
    content: str = Field(description="Message content")


class ChatRequest(BaseModel):
    """Request schema for one conversational turn."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[ChatMessage] = Field(description="Prior messages, oldest first")
    session_id: str | None = Field(
        default=None,
        alias="sessionId",
        description="Existing session ID; a new session is created when absent or unknown",
    )


class ChatResponse(BaseModel):
    """Response schema for one conversational turn."""

    model_config = ConfigDict(populate_by_name=True)

    reply: ChatMessage
    session_id: str = Field(alias="sessionId")
