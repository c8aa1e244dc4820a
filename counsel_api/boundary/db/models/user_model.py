"""
User ORM model.

Users are created outside this service; the table exists so sessions
and messages have a foreign key target.

Dependencies: sqlalchemy, counsel_api.boundary.db.base
System role: Foreign key anchor for sessions and messages
"""

from sqlalchemy.orm import relationship

from counsel_api.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class UserModel(Base, IntegerIDMixin, TimestampMixin):
    """User ORM model."""

    __tablename__ = "users"

    sessions = relationship("SessionModel", back_populates="user")
    messages = relationship("MessageModel", back_populates="user")
