"""Service orchestrators."""

from .message_service import MessageService
from .session_service import SessionService

__all__ = [
    "MessageService",
    "SessionService",
]
