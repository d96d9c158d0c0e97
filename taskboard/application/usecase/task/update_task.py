"""Update task use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.task.access import load_task_access
from taskboard.application.usecase.task.fields import TaskChanges
from taskboard.application.usecase.view import TaskView, task_view
from taskboard.domain.service import ProjectService, TaskService
from taskboard.domain.value import TaskId


class UpdateTaskRequest(BaseModel):
    """Update task request."""

    task_id: str
    user_id: str
    changes: TaskChanges


class UpdateTaskUseCase(BaseUseCase):
    """Use case for editing a task."""

    def __init__(
        self, task_service: TaskService, project_service: ProjectService
    ) -> None:
        self.task_service = task_service
        self.project_service = project_service

    async def execute(self, request: UpdateTaskRequest) -> TaskView:
        """Apply a partial update; owners and editors only.

        Raises:
            NotFoundError: If the task or its project is absent
            ForbiddenError: If the caller may not edit the task
        """
        with logfire.span(
            "update_task", task_id=request.task_id, user_id=request.user_id
        ):
            task, _ = await load_task_access(
                self.task_service,
                self.project_service,
                TaskId(UUID(request.task_id)),
                parse_user_id(request.user_id),
                write=True,
            )
            updated = await self.task_service.update_task(
                task, request.changes.as_update()
            )
            return task_view(updated)
