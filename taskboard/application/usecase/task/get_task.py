"""Get task use case."""

from uuid import UUID

from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.task.access import load_task_access
from taskboard.application.usecase.view import TaskView, task_view
from taskboard.domain.service import ProjectService, TaskService
from taskboard.domain.value import TaskId


class GetTaskRequest(BaseModel):
    """Get task request."""

    task_id: str
    user_id: str


class GetTaskUseCase(BaseUseCase):
    """Use case for reading a single task."""

    def __init__(
        self, task_service: TaskService, project_service: ProjectService
    ) -> None:
        self.task_service = task_service
        self.project_service = project_service

    async def execute(self, request: GetTaskRequest) -> TaskView:
        """Get a task any project role can read."""
        task, _ = await load_task_access(
            self.task_service,
            self.project_service,
            TaskId(UUID(request.task_id)),
            parse_user_id(request.user_id),
        )
        return task_view(task)
