"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from counsel_api.observability.correlation import get_correlation_id, set_correlation_id
from counsel_api.observability.logger import configure_logging

__all__ = ["configure_logging", "get_correlation_id", "set_correlation_id"]
