"""In-memory unit of work for testing."""

from taskboard.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory writes are visible at once; commits are only counted."""

    def __init__(self) -> None:
        super().__init__()
        self.commits = 0

    async def _commit(self) -> None:
        self.commits += 1
