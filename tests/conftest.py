"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite async databases, seeded users, fake completion client,
mock session factories
Dependencies: pytest, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

from counsel_api.boundary.db.base import Base
from counsel_api.boundary.db.models import UserModel


class FakeCompletionClient:
    """Stand-in for CompletionClient returning a canned reply or raising."""

    def __init__(self, reply: str = "  It's okay to feel that way.  ", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with users 1 and 2 seeded
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        session.add_all([UserModel(id=1), UserModel(id=2)])
        await session.commit()
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def file_session_factory(tmp_path):
    """
    Session factory over a file-backed SQLite database.

    NullPool gives every session its own connection, so concurrent reads
    (page + count) work the way they do against PostgreSQL.

    Yields:
        async_sessionmaker: Factory with users 1 and 2 seeded
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'counsel_test.db'}",
        poolclass=NullPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        session.add_all([UserModel(id=1), UserModel(id=2)])
        await session.commit()

    yield factory

    await engine.dispose()


@pytest.fixture
def fake_completion_client() -> FakeCompletionClient:
    """Provide completion client stand-in with a whitespace-padded reply."""
    return FakeCompletionClient()


@pytest.fixture
def mock_session_factory() -> MagicMock:
    """
    Create a mock session factory yielding two mock sessions.

    Returns:
        MagicMock: Callable usable as ``async with factory() as session``;
        ``factory.sessions`` holds the sessions handed out, in order
    """
    sessions = [AsyncMock(spec=AsyncSession), AsyncMock(spec=AsyncSession)]
    contexts = []
    for session in sessions:
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=session)
        context.__aexit__ = AsyncMock(return_value=False)
        contexts.append(context)

    factory = MagicMock(side_effect=contexts)
    factory.sessions = sessions
    return factory
