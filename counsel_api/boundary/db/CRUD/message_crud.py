"""
Message CRUD operations.

Provides creation and filtered, paginated reads for MessageModel.

Dependencies: sqlalchemy, counsel_api.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Sequence

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from counsel_api.boundary.db.models.message_model import MessageModel, Sender
from counsel_api.boundary.db.CRUD.base_crud import BaseCRUD


class MessageCRUD(BaseCRUD[MessageModel]):
    """
    CRUD operations for MessageModel.

    Extends BaseCRUD with user/session scoped listing and counting.
    Listing and counting share one filter so ``total`` always describes
    the same row set the pages are cut from.
    """

    def __init__(self) -> None:
        """Initialize MessageCRUD with MessageModel."""
        super().__init__(MessageModel)

    @staticmethod
    def _filters(user_id: int, session_id: int | None) -> list[ColumnElement[bool]]:
        conditions = [MessageModel.user_id == user_id]
        if session_id is not None:
            conditions.append(MessageModel.session_id == session_id)
        return conditions

    async def create_message(
        self,
        session: AsyncSession,
        text: str,
        sender: Sender,
        user_id: int,
        session_id: int,
    ) -> MessageModel:
        """
        Add a message to a session.

        Args:
            session: Async database session
            text: Message body
            sender: Authorship tag
            user_id: Owning user id
            session_id: Target session id

        Returns:
            Created MessageModel (flushed, not committed)
        """
        return await self.create(
            session,
            text=text,
            sender=sender,
            user_id=user_id,
            session_id=session_id,
        )

    async def get_page(
        self,
        session: AsyncSession,
        user_id: int,
        session_id: int | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Sequence[MessageModel]:
        """
        Retrieve one page of a user's messages in creation order.

        Args:
            session: Async database session
            user_id: Owning user id
            session_id: Restrict to one session when given
            offset: Number of messages to skip
            limit: Maximum number of messages to return

        Returns:
            Sequence of MessageModels ordered by (created_at, id)
        """
        stmt = (
            select(MessageModel)
            .where(*self._filters(user_id, session_id))
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count(
        self,
        session: AsyncSession,
        user_id: int,
        session_id: int | None = None,
    ) -> int:
        """
        Count a user's messages, optionally within one session.

        Args:
            session: Async database session
            user_id: Owning user id
            session_id: Restrict to one session when given

        Returns:
            int: Number of matching messages
        """
        stmt = (
            select(func.count())
            .select_from(MessageModel)
            .where(*self._filters(user_id, session_id))
        )
        result = await session.execute(stmt)
        return result.scalar_one()


message_crud = MessageCRUD()
