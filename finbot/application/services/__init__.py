"""Service orchestrators."""

from .chat_service import ChatService
from .delivery_service import DeliveryService
from .session_service import SessionService

__all__ = [
    "ChatService",
    "DeliveryService",
    "SessionService",
]
