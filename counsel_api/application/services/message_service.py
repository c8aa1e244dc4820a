"""
Message service for the counseling conversation flow.

Orchestrates message listing and the post-message flow: store the user
message, ask the completion service for a reply, store the counselor reply.

Dependencies: counsel_api.boundary.db, counsel_api.boundary.llm
System role: Chat message use case orchestration
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from counsel_api.boundary.db.CRUD.message_crud import message_crud
from counsel_api.boundary.db.models.message_model import MessageModel, Sender
from counsel_api.boundary.llm.completion_client import CompletionClient
from counsel_api.core.exceptions import MessagePersistenceError

logger = logging.getLogger(__name__)


def message_to_dict(message: MessageModel) -> dict:
    return {
        "id": message.id,
        "text": message.text,
        "sender": message.sender,
        "user_id": message.user_id,
        "session_id": message.session_id,
        "created_at": message.created_at,
    }


class MessageService:
    """
    Message service for counseling chat.

    The post flow is two committed writes around one completion call.
    There is no compensation: if the reply cannot be produced or stored,
    the user message stays committed and shows up in listings without a
    counselor message after it.
    """

    def __init__(
        self,
        db: AsyncSession,
        completion_client: CompletionClient,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """
        Initialize message service.

        Args:
            db: AsyncSession for writes
            completion_client: Client producing counselor replies
            session_factory: Factory for the independent sessions used by
                concurrent reads
        """
        self.db = db
        self.completion_client = completion_client
        self.session_factory = session_factory

    async def list_messages(
        self,
        user_id: int,
        session_id: int | None = None,
        page: int = 0,
        limit: int = 10,
    ) -> dict:
        """
        Get one page of a user's messages and the total match count.

        The page and the count are read concurrently on separate sessions.

        Args:
            user_id: Owning user id
            session_id: Restrict to one session when given
            page: Zero-based page number
            limit: Page size

        Returns:
            dict: {"messages": list[dict], "total": int}
        """
        async with self.session_factory() as page_db, self.session_factory() as count_db:
            messages, total = await asyncio.gather(
                message_crud.get_page(
                    page_db,
                    user_id=user_id,
                    session_id=session_id,
                    offset=page * limit,
                    limit=limit,
                ),
                message_crud.count(count_db, user_id=user_id, session_id=session_id),
            )

        return {
            "messages": [message_to_dict(m) for m in messages],
            "total": total,
        }

    async def post_message(self, text: str, user_id: int, session_id: int) -> list[dict]:
        """
        Store a user message and the counselor reply to it.

        Flow:
        1. Store and commit the user message
        2. Request a reply for the raw text
        3. Trim the reply
        4. Store and commit the counselor message

        Args:
            text: User message text
            user_id: Author user id
            session_id: Target session id

        Returns:
            list[dict]: [user_message, counselor_message]

        Raises:
            MessagePersistenceError: With the failed step; for steps after 1
                the committed user message id is attached
        """
        # Step 1: store user message
        try:
            user_message = await message_crud.create_message(
                self.db,
                text=text,
                sender=Sender.USER,
                user_id=user_id,
                session_id=session_id,
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"{__name__}:post_message - User message storage failed: {type(e).__name__}: {e}")
            raise MessagePersistenceError(str(e), step="store_user") from e

        # Step 2: ask for a reply
        try:
            reply = await self.completion_client.complete(text)
        except Exception as e:
            logger.error(
                f"{__name__}:post_message - Completion failed, user message {user_message.id} left without reply: {e}"
            )
            raise MessagePersistenceError(
                str(e), step="completion", user_message_id=user_message.id
            ) from e

        # Step 3-4: store trimmed reply
        try:
            counselor_message = await message_crud.create_message(
                self.db,
                text=reply.strip(),
                sender=Sender.COUNSELOR,
                user_id=user_id,
                session_id=session_id,
            )
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(
                f"{__name__}:post_message - Counselor message storage failed, user message {user_message.id} left without reply: {e}"
            )
            raise MessagePersistenceError(
                str(e), step="store_counselor", user_message_id=user_message.id
            ) from e

        logger.info(
            f"Stored message pair {user_message.id}/{counselor_message.id} in session {session_id}"
        )
        return [message_to_dict(user_message), message_to_dict(counselor_message)]
