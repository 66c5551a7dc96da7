"""
Session CRUD operations.

Dependencies: sqlalchemy, finbot.boundary.db.models.session_model
System role: Session persistence operations
"""

from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from finbot.boundary.db.CRUD.base_crud import BaseCRUD
from finbot.boundary.db.models.session_model import SessionModel


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def create_empty(self, session: AsyncSession) -> SessionModel:
        """Create a session row with no profile fields."""
        return await self.create(session, asked_fields=[])

    async def save_profile(
        self,
        session: AsyncSession,
        id: str,
        name: str | None,
        email: str | None,
        income: str | None,
        asked_fields: Iterable[str],
    ) -> SessionModel | None:
        """
        Overwrite the profile columns of a session.

        Returns:
            Updated SessionModel if found, None otherwise
        """
        return await self.update_by_id(
            session,
            id,
            name=name,
            email=email,
            income=income,
            asked_fields=list(asked_fields),
        )


session_crud = SessionCRUD()
