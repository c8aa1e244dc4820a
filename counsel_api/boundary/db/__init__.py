"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - UserModel, SessionModel, MessageModel, Sender: Domain entities
  - session_crud, message_crud: CRUD operation singletons

Dependencies: sqlalchemy, counsel_api.configs
System role: Database adapter providing persistent storage for sessions
and messages.
"""

from counsel_api.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from counsel_api.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
    iter_async_db,
)
from counsel_api.boundary.db.models import MessageModel, Sender, SessionModel, UserModel
from counsel_api.boundary.db.CRUD import (
    BaseCRUD,
    MessageCRUD,
    SessionCRUD,
    message_crud,
    session_crud,
)

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "get_async_engine",
    "get_async_session_factory",
    "iter_async_db",
    # Models
    "UserModel",
    "SessionModel",
    "MessageModel",
    "Sender",
    # CRUD classes
    "BaseCRUD",
    "SessionCRUD",
    "MessageCRUD",
    # CRUD singletons
    "session_crud",
    "message_crud",
]
