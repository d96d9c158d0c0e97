"""Async engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taskboard.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Pooled engine; SQL is echoed in debug mode."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions span one request and are committed by the DI provider.

    Repositories issue Core statements, so rows are written as they execute
    and nothing relies on ORM autoflush or expiry.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
