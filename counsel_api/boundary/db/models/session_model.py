"""
Session ORM model.

Represents a named grouping of counseling messages belonging to one user.

Dependencies: sqlalchemy, counsel_api.boundary.db.base
System role: Session persistence for chat grouping
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from counsel_api.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class SessionModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Session ORM model.

    Created explicitly by the user and never mutated afterwards.

    Attributes:
        id: Integer primary key (auto-generated)
        user_id: Owning user
        title: Display title chosen by the user
        created_at: Session creation timestamp (UTC)

    Relationships:
        user: Many-to-one with UserModel
        messages: One-to-many with MessageModel
    """

    __tablename__ = "sessions"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Relationships
    user = relationship("UserModel", back_populates="sessions")
    messages = relationship("MessageModel", back_populates="session")
