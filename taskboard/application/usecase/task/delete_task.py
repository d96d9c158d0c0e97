"""Delete task use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.task.access import load_task_access
from taskboard.domain.service import ProjectService, TaskService
from taskboard.domain.value import TaskId


class DeleteTaskRequest(BaseModel):
    """Delete task request."""

    task_id: str
    user_id: str


class DeleteTaskResponse(BaseModel):
    """Delete task response."""

    task_id: str
    deleted: bool = True


class DeleteTaskUseCase(BaseUseCase):
    """Use case for deleting a task."""

    def __init__(
        self, task_service: TaskService, project_service: ProjectService
    ) -> None:
        self.task_service = task_service
        self.project_service = project_service

    async def execute(self, request: DeleteTaskRequest) -> DeleteTaskResponse:
        """Delete a task; owners and editors only.

        Raises:
            NotFoundError: If the task or its project is absent
            ForbiddenError: If the caller may not edit the task
        """
        with logfire.span(
            "delete_task", task_id=request.task_id, user_id=request.user_id
        ):
            task, _ = await load_task_access(
                self.task_service,
                self.project_service,
                TaskId(UUID(request.task_id)),
                parse_user_id(request.user_id),
                write=True,
            )
            await self.task_service.delete_task(task)
            return DeleteTaskResponse(task_id=request.task_id)
