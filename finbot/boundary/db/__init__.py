"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, StringIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - create_tables(): Startup schema creation
  - SessionModel, session_crud: Session persistence

Dependencies: sqlalchemy, aiosqlite, finbot.configs
System role: Durable storage for session profiles
"""

from finbot.boundary.db.base import Base, StringIDMixin, TimestampMixin
from finbot.boundary.db.connection import (
    create_tables,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from finbot.boundary.db.CRUD import BaseCRUD, SessionCRUD, session_crud
from finbot.boundary.db.models.session_model import SessionModel

__all__ = [
    "Base",
    "BaseCRUD",
    "SessionCRUD",
    "SessionModel",
    "StringIDMixin",
    "TimestampMixin",
    "create_tables",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "session_crud",
]
