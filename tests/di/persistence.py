"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from taskboard.domain.repository import (
    InviteRepository,
    ProjectRepository,
    TaskRepository,
    UnitOfWork,
)
from taskboard.persistence.repository.inmemory import (
    InMemoryInviteRepository,
    InMemoryProjectRepository,
    InMemoryTaskRepository,
    InMemoryUnitOfWork,
)
from taskboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data outlives a single request: an API test makes
    several requests against one container. Every test builds its own
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_project_repository(self) -> ProjectRepository:
        """Provide in-memory project repository."""
        return InMemoryProjectRepository()

    @provide(scope=Scope.APP)
    def get_invite_repository(self) -> InviteRepository:
        """Provide in-memory invite repository."""
        return InMemoryInviteRepository()

    @provide(scope=Scope.APP)
    def get_task_repository(self) -> TaskRepository:
        """Provide in-memory task repository."""
        return InMemoryTaskRepository()

    @provide(scope=Scope.REQUEST)
    async def get_in_memory_unit_of_work(self) -> AsyncIterator[InMemoryUnitOfWork]:
        """Commit at the end of a successful request, like the real session."""
        unit_of_work = InMemoryUnitOfWork()
        try:
            yield unit_of_work
        except Exception:
            unit_of_work.discard()
            raise
        await unit_of_work.commit()

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, unit_of_work: InMemoryUnitOfWork) -> UnitOfWork:
        """Expose the counting unit of work under its interface."""
        return unit_of_work
