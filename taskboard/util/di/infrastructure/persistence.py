"""Persistence component: PostgreSQL repositories over one session per request."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from taskboard.config import Settings
from taskboard.domain.repository import (
    InviteRepository,
    ProjectRepository,
    TaskRepository,
    UnitOfWork,
)
from taskboard.persistence.database import create_engine, create_session_factory
from taskboard.persistence.repository import (
    PostgresInviteRepository,
    PostgresProjectRepository,
    PostgresTaskRepository,
    SessionUnitOfWork,
)
from taskboard.util.di.base import ProviderBase
from taskboard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories for projects, invites and tasks."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL via asyncpg.

    Each request runs in one transaction: committed when the handler
    returns, rolled back when an exception leaves it. A cascade that fails
    halfway therefore leaves nothing behind.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back request transaction",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        return PostgresProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invite_repository(self, session: AsyncSession) -> InviteRepository:
        return PostgresInviteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, session: AsyncSession) -> TaskRepository:
        return PostgresTaskRepository(session)

    @provide(scope=Scope.REQUEST)
    async def get_unit_of_work(
        self, session: AsyncSession
    ) -> AsyncIterator[UnitOfWork]:
        """Commit at the end of a successful request, then run queued actions."""
        unit_of_work = SessionUnitOfWork(session)
        try:
            yield unit_of_work
        except Exception:
            unit_of_work.discard()
            raise
        await unit_of_work.commit()
