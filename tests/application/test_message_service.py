"""
Test suite for MessageService.

Tests the post-message flow (store, complete, trim, store) including its
partial-failure behavior, and concurrent page/count listing. Uses mocked
CRUD, database session and completion client.

System role: Verification of message service orchestration layer
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from counsel_api.application.services.message_service import MessageService
from counsel_api.boundary.db.models.message_model import MessageModel, Sender
from counsel_api.core.exceptions import CompletionError, MessagePersistenceError


def make_message(id: int, text: str, sender: Sender) -> MessageModel:
    return MessageModel(
        id=id,
        text=text,
        sender=sender,
        user_id=1,
        session_id=7,
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def mock_completion_client() -> MagicMock:
    """Provide completion client returning a padded reply."""
    client = MagicMock()
    client.complete = AsyncMock(return_value="  It's okay to feel that way.  ")
    return client


@pytest.fixture
def message_service(
    mock_db_session: AsyncSession,
    mock_completion_client: MagicMock,
    mock_session_factory: MagicMock,
) -> MessageService:
    """Provide MessageService with mocked dependencies."""
    return MessageService(
        db=mock_db_session,
        completion_client=mock_completion_client,
        session_factory=mock_session_factory,
    )


@pytest.fixture
def mock_message_crud():
    """Patch the message CRUD singleton used by the service."""
    with patch("counsel_api.application.services.message_service.message_crud") as crud:
        crud.create_message = AsyncMock(
            side_effect=lambda db, text, sender, user_id, session_id: make_message(
                1 if sender == Sender.USER else 2, text, sender
            )
        )
        crud.get_page = AsyncMock(return_value=[])
        crud.count = AsyncMock(return_value=0)
        yield crud


class TestMessageServicePostMessage:
    """Test suite for MessageService.post_message()."""

    @pytest.mark.asyncio
    async def test_post_message_should_return_user_then_counselor(
        self, message_service: MessageService, mock_message_crud: MagicMock
    ) -> None:
        """Test both messages are returned in order with the reply trimmed."""
        result = await message_service.post_message(text="I feel anxious", user_id=1, session_id=7)

        assert [m["sender"] for m in result] == [Sender.USER, Sender.COUNSELOR]
        assert result[0]["text"] == "I feel anxious"
        assert result[1]["text"] == "It's okay to feel that way."
        assert result[1]["session_id"] == 7

    @pytest.mark.asyncio
    async def test_post_message_should_send_raw_text_as_prompt(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_completion_client: MagicMock,
    ) -> None:
        """Test the untouched user text is the completion prompt."""
        await message_service.post_message(text="  I feel anxious ", user_id=1, session_id=7)

        mock_completion_client.complete.assert_awaited_once_with("  I feel anxious ")

    @pytest.mark.asyncio
    async def test_post_message_should_commit_user_message_before_completion(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_db_session: AsyncSession,
        mock_completion_client: MagicMock,
    ) -> None:
        """Test the user message is committed before the completion call starts."""
        call_order = []
        mock_db_session.commit.side_effect = lambda: call_order.append("commit")

        async def complete(prompt: str) -> str:
            call_order.append("complete")
            return "reply"

        mock_completion_client.complete.side_effect = complete

        await message_service.post_message(text="hi", user_id=1, session_id=7)

        assert call_order == ["commit", "complete", "commit"]

    @pytest.mark.asyncio
    async def test_post_message_should_keep_user_message_when_completion_fails(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_db_session: AsyncSession,
        mock_completion_client: MagicMock,
    ) -> None:
        """Test a completion failure leaves only the committed user message."""
        mock_completion_client.complete.side_effect = CompletionError("model unavailable")

        with pytest.raises(MessagePersistenceError) as exc_info:
            await message_service.post_message(text="hi", user_id=1, session_id=7)

        assert str(exc_info.value) == "model unavailable"
        assert exc_info.value.step == "completion"
        assert exc_info.value.user_message_id == 1
        assert mock_message_crud.create_message.await_count == 1
        mock_db_session.commit.assert_awaited_once()
        mock_db_session.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post_message_should_not_call_completion_when_user_store_fails(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_db_session: AsyncSession,
        mock_completion_client: MagicMock,
    ) -> None:
        """Test a failed first write aborts the flow and rolls back."""
        mock_message_crud.create_message.side_effect = RuntimeError("foreign key violation")

        with pytest.raises(MessagePersistenceError) as exc_info:
            await message_service.post_message(text="hi", user_id=1, session_id=999)

        assert exc_info.value.step == "store_user"
        assert exc_info.value.user_message_id is None
        mock_completion_client.complete.assert_not_awaited()
        mock_db_session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_post_message_should_report_counselor_store_failure(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_db_session: AsyncSession,
    ) -> None:
        """Test a failed second write keeps the first and names the step."""
        mock_message_crud.create_message.side_effect = [
            make_message(1, "hi", Sender.USER),
            RuntimeError("connection reset"),
        ]

        with pytest.raises(MessagePersistenceError) as exc_info:
            await message_service.post_message(text="hi", user_id=1, session_id=7)

        assert exc_info.value.step == "store_counselor"
        assert exc_info.value.user_message_id == 1
        assert str(exc_info.value) == "connection reset"
        mock_db_session.commit.assert_awaited_once()
        mock_db_session.rollback.assert_awaited_once()


class TestMessageServiceListMessages:
    """Test suite for MessageService.list_messages()."""

    @pytest.mark.asyncio
    async def test_list_messages_should_translate_page_to_offset(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_session_factory: MagicMock,
    ) -> None:
        """Test page/limit become offset/limit on the page query."""
        await message_service.list_messages(user_id=1, session_id=7, page=3, limit=5)

        mock_message_crud.get_page.assert_awaited_once_with(
            mock_session_factory.sessions[0],
            user_id=1,
            session_id=7,
            offset=15,
            limit=5,
        )
        mock_message_crud.count.assert_awaited_once_with(
            mock_session_factory.sessions[1], user_id=1, session_id=7
        )

    @pytest.mark.asyncio
    async def test_list_messages_should_use_separate_sessions(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
        mock_session_factory: MagicMock,
        mock_db_session: AsyncSession,
    ) -> None:
        """Test page and count run on two factory sessions, not the request session."""
        await message_service.list_messages(user_id=1)

        assert mock_session_factory.call_count == 2
        page_db = mock_message_crud.get_page.await_args.args[0]
        count_db = mock_message_crud.count.await_args.args[0]
        assert page_db is not count_db
        assert mock_db_session not in (page_db, count_db)

    @pytest.mark.asyncio
    async def test_list_messages_should_return_messages_and_total(
        self,
        message_service: MessageService,
        mock_message_crud: MagicMock,
    ) -> None:
        """Test result shape is messages plus total."""
        mock_message_crud.get_page.return_value = [make_message(1, "hi", Sender.USER)]
        mock_message_crud.count.return_value = 12

        result = await message_service.list_messages(user_id=1)

        assert result["total"] == 12
        assert len(result["messages"]) == 1
        assert result["messages"][0]["text"] == "hi"
        assert result["messages"][0]["sender"] == Sender.USER
