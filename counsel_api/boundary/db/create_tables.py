"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, counsel_api.configs
System role: Database schema initialization

Usage:
    python -m counsel_api.boundary.db.create_tables
"""

import asyncio
import logging

from counsel_api.boundary.db.base import Base
from counsel_api.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from counsel_api.boundary.db.models import MessageModel, SessionModel, UserModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: create_all skips tables that already exist.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("All tables created successfully.")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_all_tables())
