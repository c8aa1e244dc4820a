"""
Dependency injection container.

Factory functions for FastAPI dependencies. The engine, session factory
and completion client are built once per process and shared by every
request; each request gets its own database session.

Dependencies: counsel_api.configs, counsel_api.application, counsel_api.boundary
System role: DI container for service injection
"""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from counsel_api.application.services import MessageService, SessionService
from counsel_api.boundary.db.connection import (
    get_async_engine,
    get_async_session_factory,
    iter_async_db,
)
from counsel_api.boundary.llm.completion_client import CompletionClient
from counsel_api.configs import get_settings


class ServiceCache:
    """Container for cached process-wide clients."""

    def __init__(self):
        self._engine = None
        self._session_factory = None
        self._completion_client = None

    @property
    def engine(self) -> AsyncEngine:
        """Get cached async engine."""
        if self._engine is None:
            self._engine = get_async_engine()
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get cached async session factory."""
        if self._session_factory is None:
            self._session_factory = get_async_session_factory(self.engine)
        return self._session_factory

    @property
    def completion_client(self) -> CompletionClient:
        """Get cached completion client."""
        if self._completion_client is None:
            settings = get_settings()
            self._completion_client = CompletionClient(
                api_key=settings.completion.api_key,
                model_id=settings.completion.model,
                temperature=settings.completion.temperature,
            )
        return self._completion_client

    async def dispose(self) -> None:
        """Close pooled connections and clear all cached instances."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        self._completion_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the process-wide async session factory."""
    return get_service_cache().session_factory


def get_completion_client() -> CompletionClient:
    """Get the process-wide completion client."""
    return get_service_cache().completion_client


async def get_async_db(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection with automatic cleanup.

    Yields:
        AsyncSession: Async SQLAlchemy session (scoped to request lifetime)
    """
    async for session in iter_async_db(session_factory):
        yield session


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)


def get_message_service(
    db: AsyncSession = Depends(get_async_db),
    completion_client: CompletionClient = Depends(get_completion_client),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> MessageService:
    """
    Get message service instance.

    Args:
        db: Async database session (injected via Depends)
        completion_client: Shared completion client (injected via Depends)
        session_factory: Shared session factory for concurrent reads

    Returns:
        MessageService: Message service instance
    """
    return MessageService(
        db=db,
        completion_client=completion_client,
        session_factory=session_factory,
    )
