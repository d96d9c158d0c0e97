"""Task domain service."""

from collections.abc import Sequence
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from taskboard.domain.model.common import utcnow
from taskboard.domain.model.event import TaskEvent
from taskboard.domain.model.task import Task
from taskboard.domain.repository import TaskRepository, UnitOfWork
from taskboard.domain.value import ProjectId, TaskEventType, TaskId, TaskPriority, UserId

from .base import Service
from .realtime import TaskEventPublisher

# Fields a caller may change on an existing task
MUTABLE_FIELDS = frozenset(
    {"title", "description", "priority", "due_date", "tags", "completed"}
)


class TaskService(Service):
    """Domain service for task persistence and change events.

    Authorization is decided by the caller before any method here runs.
    Change events are published once the request commits, so subscribers
    never refetch before the change is visible.
    """

    def __init__(
        self,
        task_repository: TaskRepository,
        event_publisher: TaskEventPublisher,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize task service.

        Args:
            task_repository: Task repository
            event_publisher: Realtime event sink
            unit_of_work: Commit boundary events wait for
        """
        self.task_repository = task_repository
        self.event_publisher = event_publisher
        self.unit_of_work = unit_of_work

    async def create_task(
        self,
        owner_id: UserId,
        title: str,
        project_id: ProjectId | None = None,
        description: str = "",
        priority: TaskPriority = TaskPriority.LOW,
        due_date: datetime | None = None,
        tags: list[str] | None = None,
        completed: bool = False,
    ) -> Task:
        """Create a task.

        Args:
            owner_id: Recorded owner
            title: Title
            project_id: Project, None for a personal task
            description: Description
            priority: Priority
            due_date: Optional due date
            tags: Optional tags
            completed: Create already done, stamping completed_at

        Returns:
            Created task
        """
        with logfire.span(
            "task_service.create_task",
            owner_id=str(owner_id),
            project_id=str(project_id) if project_id else None,
        ):
            now = utcnow()
            task = Task(
                id=TaskId(uuid4()),
                title=title,
                description=description,
                priority=priority,
                due_date=due_date,
                tags=tags or [],
                owner_id=owner_id,
                project_id=project_id,
                completed=completed,
                completed_at=now if completed else None,
                created_at=now,
            )
            saved = await self.task_repository.save(task)
            logfire.info("Task created", task_id=str(saved.id))
            self._publish_after_commit(TaskEventType.CREATED, saved)
            return saved

    async def get_task(self, task_id: TaskId) -> Task | None:
        """Get task by ID."""
        return await self.task_repository.find_by_id(task_id)

    async def list_project_tasks(self, project_id: ProjectId) -> list[Task]:
        """Tasks of a project, newest first."""
        return await self.task_repository.find_by_project(project_id)

    async def list_visible_tasks(
        self, user_id: UserId, project_ids: Sequence[ProjectId]
    ) -> list[Task]:
        """Personal tasks of a user plus tasks of the given projects."""
        with logfire.span("task_service.list_visible_tasks", user_id=str(user_id)):
            tasks = await self.task_repository.find_visible_to(user_id, project_ids)
            logfire.info(
                "Tasks listed",
                user_id=str(user_id),
                project_count=len(project_ids),
                count=len(tasks),
            )
            return tasks

    async def update_task(self, task: Task, changes: dict[str, Any]) -> Task:
        """Apply a partial update.

        Setting ``completed`` stamps ``completed_at`` on the transition to
        done and clears it when reopened.

        Args:
            task: Current task
            changes: Field values to change; unknown keys are ignored

        Returns:
            Updated task

        Raises:
            pydantic.ValidationError: If a changed value is invalid
        """
        with logfire.span("task_service.update_task", task_id=str(task.id)):
            update = {k: v for k, v in changes.items() if k in MUTABLE_FIELDS}

            if "completed" in update:
                if update["completed"] and not task.completed:
                    update["completed_at"] = utcnow()
                elif not update["completed"]:
                    update["completed_at"] = None

            updated = Task.model_validate({**task.model_dump(), **update})
            saved = await self.task_repository.save(updated)
            logfire.info(
                "Task updated", task_id=str(task.id), fields=sorted(update.keys())
            )
            self._publish_after_commit(TaskEventType.UPDATED, saved)
            return saved

    async def delete_task(self, task: Task) -> None:
        """Delete a task."""
        with logfire.span("task_service.delete_task", task_id=str(task.id)):
            await self.task_repository.delete(task.id)
            logfire.info("Task deleted", task_id=str(task.id))
            self._publish_after_commit(TaskEventType.DELETED, task)

    def _publish_after_commit(self, event_type: TaskEventType, task: Task) -> None:
        """Queue a change event for project tasks; personal tasks have none."""
        if task.project_id is None:
            return

        event = TaskEvent(
            type=event_type,
            project_id=task.project_id,
            task_id=task.id,
            task=None
            if event_type == TaskEventType.DELETED
            else task.model_dump(mode="json"),
        )
        self.unit_of_work.after_commit(lambda: self._publish(event))

    async def _publish(self, event: TaskEvent) -> None:
        """Deliver an event; failures are only logged."""
        try:
            await self.event_publisher.publish(event)
        except Exception as e:
            logfire.error(
                "Task event publish failed",
                channel=event.channel,
                event_type=event.type.value,
                error=str(e),
                error_type=type(e).__name__,
            )
