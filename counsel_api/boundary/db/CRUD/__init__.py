"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from counsel_api.boundary.db.CRUD import session_crud, message_crud

    sessions = await session_crud.get_by_user(db, user_id)
"""

from counsel_api.boundary.db.CRUD.base_crud import BaseCRUD
from counsel_api.boundary.db.CRUD.session_crud import SessionCRUD, session_crud
from counsel_api.boundary.db.CRUD.message_crud import MessageCRUD, message_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
    "MessageCRUD",
    "message_crud",
]
