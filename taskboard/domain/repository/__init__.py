"""Repository interfaces for Taskboard domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from taskboard.domain.repository.invite import InviteRepository
from taskboard.domain.repository.project import ProjectRepository
from taskboard.domain.repository.task import TaskRepository
from taskboard.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "InviteRepository",
    "ProjectRepository",
    "TaskRepository",
    "UnitOfWork",
]
