"""In-memory task repository for testing."""

from typing import Optional, Sequence

from taskboard.domain.model.task import Task
from taskboard.domain.repository.task import TaskRepository
from taskboard.domain.value import ProjectId, TaskId, UserId


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of TaskRepository for testing."""

    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}

    @staticmethod
    def _newest_first(tasks: list[Task]) -> list[Task]:
        return sorted(reversed(tasks), key=lambda t: t.created_at, reverse=True)

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        return self._tasks.get(task_id)

    async def find_by_project(self, project_id: ProjectId) -> list[Task]:
        """Find tasks of a project."""
        return self._newest_first(
            [t for t in self._tasks.values() if t.project_id == project_id]
        )

    async def find_visible_to(
        self, owner_id: UserId, project_ids: Sequence[ProjectId]
    ) -> list[Task]:
        """Find personal tasks plus tasks of the given projects."""
        wanted = set(project_ids)
        return self._newest_first(
            [
                t
                for t in self._tasks.values()
                if (t.project_id is None and t.owner_id == owner_id)
                or (t.project_id is not None and t.project_id in wanted)
            ]
        )

    async def save(self, task: Task) -> Task:
        """Save a task (create or update)."""
        self._tasks[task.id] = task
        return task

    async def delete(self, task_id: TaskId) -> bool:
        """Delete a task."""
        return self._tasks.pop(task_id, None) is not None

    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every task of a project."""
        doomed = [t.id for t in self._tasks.values() if t.project_id == project_id]
        for task_id in doomed:
            del self._tasks[task_id]
        return len(doomed)
