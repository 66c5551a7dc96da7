"""
Profile domain types.

SessionProfile is the per-session state owned by the ProfileTracker;
ExtractionResult is the transient per-turn output of the FieldExtractor.

Dependencies: pydantic
System role: Progressive profiling data structures
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, field_validator

ProfileField = Literal["name", "email", "income"]

# Canonical order; drives "missing" ordering and prompt rendering.
PROFILE_FIELDS: tuple[ProfileField, ...] = get_args(ProfileField)


class ExtractionResult(BaseModel):
    """Partial record of profile fields found in one utterance."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    email: str | None = None
    income: str | None = None

    @field_validator("name", "email", "income", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            value = str(value)
        value = value.strip()
        return value or None

    def present(self) -> dict[str, str]:
        """Return only the fields that were found, in canonical order."""
        return {f: getattr(self, f) for f in PROFILE_FIELDS if getattr(self, f) is not None}

    def is_empty(self) -> bool:
        return not self.present()


@dataclass
class SessionProfile:
    """Known profile fields and already-asked fields for one session."""

    id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    name: str | None = None
    email: str | None = None
    income: str | None = None
    asked_fields: set[str] = field(default_factory=set)

    def known(self) -> dict[str, str]:
        """Known field values in canonical order."""
        return {f: getattr(self, f) for f in PROFILE_FIELDS if getattr(self, f)}

    def missing(self) -> list[ProfileField]:
        """Unknown fields in canonical order."""
        return [f for f in PROFILE_FIELDS if not getattr(self, f)]

    @property
    def created_at_ms(self) -> int:
        """Creation time as epoch milliseconds."""
        return int(self.created_at.timestamp() * 1000)
