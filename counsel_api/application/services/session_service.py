"""
Session service orchestrator.

Coordinates session creation and listing.

Dependencies: counsel_api.boundary.db.CRUD, counsel_api.boundary.db.models
System role: Session use case orchestration
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from counsel_api.boundary.db.CRUD.session_crud import session_crud
from counsel_api.boundary.db.models.session_model import SessionModel

logger = logging.getLogger(__name__)


def session_to_dict(session: SessionModel) -> dict:
    return {
        "id": session.id,
        "user_id": session.user_id,
        "title": session.title,
        "created_at": session.created_at,
    }


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def create_session(self, user_id: int, title: str) -> dict:
        """
        Create a new session for a user.

        Args:
            user_id: Owning user id
            title: Session title

        Returns:
            dict: Session data with id, user_id, title, created_at

        Raises:
            Exception: If database operation fails (unknown user included)
        """
        try:
            session = await session_crud.create(self.db, user_id=user_id, title=title)
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Created session {session.id} for user {user_id}")
        return session_to_dict(session)

    async def get_user_sessions(self, user_id: int) -> list[dict]:
        """
        Get all sessions of a user, oldest first.

        Args:
            user_id: Owning user id

        Returns:
            list[dict]: Session dicts; empty when the user has none
        """
        sessions = await session_crud.get_by_user(self.db, user_id)
        return [session_to_dict(s) for s in sessions]
