"""
SQLAlchemy database access module.

Creates the async engine and session factory for the local assessment store.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mindpulse.core.config.settings import Settings
from mindpulse.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async engine for the configured database URL.

    Args:
        settings: Application settings

    Returns:
        AsyncEngine bound to DATABASE_URL
    """
    url = settings.DATABASE_URL
    engine_args: dict = {"echo": settings.DB_ECHO_LOG}

    if url.startswith("sqlite"):
        # SQLite-specific settings (no pooling)
        engine_args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url:
            # One shared connection, otherwise every session sees an empty database
            engine_args["poolclass"] = StaticPool
    else:
        engine_args.update({"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10})

    logger.info(f"Creating AsyncEngine for {url.split('://', 1)[0]} database")
    return create_async_engine(url, **engine_args)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False, class_=AsyncSession)


async def create_tables(engine: AsyncEngine) -> None:
    """Create the schema if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created (or verified to exist)")
