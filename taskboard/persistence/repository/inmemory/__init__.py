"""In-memory repository implementations for testing."""

from .invite import InMemoryInviteRepository
from .project import InMemoryProjectRepository
from .task import InMemoryTaskRepository
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryInviteRepository",
    "InMemoryProjectRepository",
    "InMemoryTaskRepository",
    "InMemoryUnitOfWork",
]
