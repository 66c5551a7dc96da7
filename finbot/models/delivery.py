"""
Delivery domain models and schemas.

Dependencies: pydantic
System role: Session hand-off API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class DeliverRequest(BaseModel):
    """Request schema for delivering a session's collected data."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")


class DeliveryResult(BaseModel):
    """Outcome descriptor returned by the delivery collaborator."""

    ok: bool
    id: str | None = Field(default=None, description="Transport message ID, when sent")
    destination: str = Field(description="'smtp:<host>' or the outbox file path")
    note: str | None = None
