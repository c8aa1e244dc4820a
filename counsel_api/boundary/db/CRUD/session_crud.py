"""
Session CRUD operations.

Dependencies: sqlalchemy, counsel_api.boundary.db.models
System role: Session persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from counsel_api.boundary.db.models.session_model import SessionModel
from counsel_api.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)

    async def get_by_user(
        self,
        session: AsyncSession,
        user_id: int,
    ) -> Sequence[SessionModel]:
        """
        Retrieve every session owned by a user, oldest first.

        Args:
            session: Async database session
            user_id: Owning user id

        Returns:
            Sequence of SessionModels ordered by creation time
        """
        stmt = (
            select(SessionModel)
            .where(SessionModel.user_id == user_id)
            .order_by(SessionModel.created_at.asc(), SessionModel.id.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()


session_crud = SessionCRUD()
