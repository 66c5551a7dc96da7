"""
CRUD operations for database models.

Usage:
    from finbot.boundary.db.CRUD import session_crud

    row = await session_crud.get_by_id(db, session_id)
"""

from finbot.boundary.db.CRUD.base_crud import BaseCRUD
from finbot.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
]
