"""
Database models package.

Dependencies: sqlalchemy, finbot.boundary.db.base
System role: Database model definitions for domain entities
"""

from finbot.boundary.db.models.session_model import SessionModel

__all__ = ["SessionModel"]
