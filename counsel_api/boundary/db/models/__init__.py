"""
Database models package.

Exports:
  - UserModel: User ORM model (foreign key target)
  - SessionModel: Session ORM model
  - MessageModel, Sender: Message ORM model and authorship enum

Dependencies: sqlalchemy, counsel_api.boundary.db.base
System role: Database model definitions for domain entities
"""

from counsel_api.boundary.db.models.user_model import UserModel
from counsel_api.boundary.db.models.session_model import SessionModel
from counsel_api.boundary.db.models.message_model import MessageModel, Sender

__all__ = [
    "UserModel",
    "SessionModel",
    "MessageModel",
    "Sender",
]
