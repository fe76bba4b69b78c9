"""
db/session.py
-------------
Async engine, session factory and the request-scoped session dependency.

One session per request: everything a handler does (role lookup, the access
decision's reads, the scoped write) runs in that session's transaction, so a
row fetched by scoped_write_target is the row that gets mutated.

expire_on_commit=False keeps loaded attributes usable after commit; lazy
loads are not available under asyncio.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from jobboard.core.config import settings
from jobboard.core.logging import get_logger

logger = get_logger(__name__)


def build_engine(url: str = settings.DATABASE_URL, **kwargs) -> AsyncEngine:
    """Engine for `url`. Pool sizing applies to server databases only."""
    options = {"echo": settings.DEBUG, "pool_pre_ping": True}
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=3600,
        )
    options.update(kwargs)
    return create_async_engine(url, **options)


engine = build_engine()

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def session_scope(
    factory: async_sessionmaker = AsyncSessionLocal,
) -> AsyncGenerator[AsyncSession, None]:
    """Commit on success, roll back and re-raise on any error."""
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.debug("Session rolled back")
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one transactional session per request."""
    async with session_scope() as session:
        yield session
