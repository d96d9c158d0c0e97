"""Create task use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.task.fields import NewTaskFields
from taskboard.application.usecase.view import TaskView, task_view
from taskboard.domain.error import ForbiddenError
from taskboard.domain.service import ProjectService, TaskService, can_edit
from taskboard.domain.value import ProjectId, TaskPriority


class CreateTaskRequest(BaseModel):
    """Create task request."""

    user_id: str
    project_id: str | None = None  # None for a personal task
    fields: NewTaskFields


class CreateTaskUseCase(BaseUseCase):
    """Use case for creating a personal or project task."""

    def __init__(
        self, task_service: TaskService, project_service: ProjectService
    ) -> None:
        """Initialize create task use case.

        Args:
            task_service: Task domain service
            project_service: Project domain service
        """
        self.task_service = task_service
        self.project_service = project_service

    async def execute(self, request: CreateTaskRequest) -> TaskView:
        """Create a task.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller may not edit the project
        """
        user_id = parse_user_id(request.user_id)
        project_id = ProjectId(UUID(request.project_id)) if request.project_id else None

        with logfire.span(
            "create_task", user_id=request.user_id, project_id=request.project_id
        ):
            if project_id is not None:
                _, role = await self.project_service.require_member(
                    project_id, user_id
                )
                if not can_edit(role):
                    raise ForbiddenError(
                        "Viewers cannot modify tasks", "project", request.project_id
                    )

            fields = request.fields
            task = await self.task_service.create_task(
                owner_id=user_id,
                title=fields.title,
                project_id=project_id,
                description=fields.description,
                priority=fields.priority or TaskPriority.LOW,
                due_date=fields.due_date,
                tags=fields.tags,
                completed=fields.completed,
            )
            return task_view(task)
