"""
Session ORM model.

One row per conversation: the collected profile fields and the fields the
assistant has already asked for.

Dependencies: sqlalchemy, finbot.boundary.db.base
System role: Session persistence for progressive profiling
"""

from sqlalchemy import JSON, Text
from sqlalchemy.orm import Mapped, mapped_column

from finbot.boundary.db.base import Base, StringIDMixin, TimestampMixin


class SessionModel(Base, StringIDMixin, TimestampMixin):
    """
    Session ORM model.

    Attributes:
        id: UUID string primary key (auto-generated)
        name: Collected user name
        email: Collected email address
        income: Collected income level, as the user phrased it
        asked_fields: Profile fields the assistant has already solicited
        created_at: Session creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "sessions"

    name: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    email: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    income: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    asked_fields: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Field names already asked, in canonical order",
    )
