"""Task repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from taskboard.domain.model.task import Task
from taskboard.domain.value import ProjectId, TaskId, UserId


class TaskRepository(ABC):
    """Repository for Task entity."""

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Task | None:
        """Find a task by ID."""
        pass

    @abstractmethod
    async def find_by_project(self, project_id: ProjectId) -> list[Task]:
        """Find tasks of a project, newest first."""
        pass

    @abstractmethod
    async def find_visible_to(
        self, owner_id: UserId, project_ids: Sequence[ProjectId]
    ) -> list[Task]:
        """Find a user's personal tasks plus tasks of the given projects.

        Args:
            owner_id: Owner of the personal tasks
            project_ids: Projects whose tasks are included

        Returns:
            Tasks newest first
        """
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save a task (create or update)."""
        pass

    @abstractmethod
    async def delete(self, task_id: TaskId) -> bool:
        """Delete a task. Returns True if it existed."""
        pass

    @abstractmethod
    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every task of a project. Safe to repeat.

        Returns:
            Number of deleted tasks
        """
        pass
