"""
Message ORM model.

Stores one chat turn, written either by the user or by the counselor model.

Dependencies: sqlalchemy, counsel_api.boundary.db.base
System role: Chat message persistence
"""

import enum

from sqlalchemy import Enum, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from counsel_api.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class Sender(str, enum.Enum):
    """
    Message authorship.

    USER: Written by the human user
    COUNSELOR: Generated by the completion service
    """

    USER = "user"
    COUNSELOR = "counselor"


class MessageModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Message ORM model.

    Messages are written in pairs by the message-post flow: a USER row
    followed by a COUNSELOR row. When the completion call fails only the
    USER row exists.

    Attributes:
        id: Integer primary key (auto-generated)
        text: Message body
        sender: Sender enum, stored as its value
        user_id: Owning user
        session_id: Session the message belongs to
        created_at: Message creation timestamp (UTC)
    """

    __tablename__ = "messages"

    text: Mapped[str] = mapped_column(Text, nullable=False)

    sender: Mapped[Sender] = mapped_column(
        Enum(
            Sender,
            native_enum=False,
            values_callable=lambda members: [member.value for member in members],
        ),
        nullable=False,
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    session_id: Mapped[int] = mapped_column(
        ForeignKey("sessions.id"),
        nullable=False,
        index=True,
    )

    # Relationships
    user = relationship("UserModel", back_populates="messages")
    session = relationship("SessionModel", back_populates="messages")
