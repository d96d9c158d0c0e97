"""PostgreSQL repository implementations."""

from taskboard.persistence.repository.invite import PostgresInviteRepository
from taskboard.persistence.repository.project import PostgresProjectRepository
from taskboard.persistence.repository.task import PostgresTaskRepository
from taskboard.persistence.repository.unit_of_work import SessionUnitOfWork

__all__ = [
    "PostgresInviteRepository",
    "PostgresProjectRepository",
    "PostgresTaskRepository",
    "SessionUnitOfWork",
]
