"""
Session service.

Maps session rows to SessionProfile domain objects and back. Every write
commits, so a profile update is durable before the turn continues.

Dependencies: finbot.boundary.db.CRUD, finbot.core.profiling
System role: Session use case orchestration and profile store
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from finbot.boundary.db.CRUD.session_crud import session_crud
from finbot.boundary.db.models.session_model import SessionModel
from finbot.core.exceptions import SessionNotFoundError
from finbot.core.profiling.profile import PROFILE_FIELDS, SessionProfile

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_profile(row: SessionModel) -> SessionProfile:
    """Build the domain profile from a session row."""
    return SessionProfile(
        id=row.id,
        created_at=_as_utc(row.created_at),
        name=row.name,
        email=row.email,
        income=row.income,
        asked_fields={f for f in (row.asked_fields or []) if f in PROFILE_FIELDS},
    )


class SessionService:
    """Session lifecycle operations over the async database session."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_profile(self) -> SessionProfile:
        """Create and persist an empty session."""
        row = await session_crud.create_empty(self.db)
        await self.db.commit()
        logger.info(f"{__name__}:create_profile - Created session_id={row.id}")
        return to_profile(row)

    async def get_profile(self, session_id: str) -> SessionProfile | None:
        """Load a session's profile, or None when the id is unknown."""
        row = await session_crud.get_by_id(self.db, session_id)
        return to_profile(row) if row else None

    async def save_profile(self, profile: SessionProfile) -> None:
        """
        Persist the profile's fields and asked-fields.

        Raises:
            SessionNotFoundError: Row no longer exists
        """
        row = await session_crud.save_profile(
            self.db,
            profile.id,
            name=profile.name,
            email=profile.email,
            income=profile.income,
            asked_fields=[f for f in PROFILE_FIELDS if f in profile.asked_fields],
        )
        if row is None:
            raise SessionNotFoundError(profile.id)
        await self.db.commit()

    async def lookup(self, session_id: str) -> SessionProfile:
        """
        Get a session's profile.

        Raises:
            SessionNotFoundError: If session not found
        """
        profile = await self.get_profile(session_id)
        if profile is None:
            raise SessionNotFoundError(session_id)
        return profile
