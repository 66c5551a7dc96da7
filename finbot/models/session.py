"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session lookup API contract
"""

from pydantic import BaseModel, ConfigDict, Field


class SessionResponse(BaseModel):
    """Known profile fields of a session."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str | None = None
    email: str | None = None
    income: str | None = None
    created_at: int = Field(alias="createdAt", description="Creation time, epoch milliseconds")
