"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_async_db,
    get_completion_client,
    get_message_service,
    get_service_cache,
    get_session_factory,
    get_session_service,
)

__all__ = [
    "ServiceCache",
    "get_async_db",
    "get_completion_client",
    "get_message_service",
    "get_service_cache",
    "get_session_factory",
    "get_session_service",
]
