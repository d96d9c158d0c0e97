"""List tasks use case."""

from uuid import UUID

from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import TaskView, task_view
from taskboard.domain.service import ProjectService, TaskService
from taskboard.domain.value import ProjectId


class ListTasksRequest(BaseModel):
    """List tasks request."""

    user_id: str
    project_id: str | None = None  # Restrict to one project


class ListTasksResponse(BaseModel):
    """List tasks response."""

    tasks: list[TaskView]


class ListTasksUseCase(BaseUseCase):
    """Use case for listing the tasks a user can see.

    Without a project filter: personal tasks plus the tasks of every
    project the user owns or belongs to.
    """

    def __init__(
        self, task_service: TaskService, project_service: ProjectService
    ) -> None:
        self.task_service = task_service
        self.project_service = project_service

    async def execute(self, request: ListTasksRequest) -> ListTasksResponse:
        """List tasks, newest first.

        Raises:
            NotFoundError: If the filtered project does not exist
            ForbiddenError: If the caller is not a member of the filtered project
        """
        user_id = parse_user_id(request.user_id)

        if request.project_id:
            project, _ = await self.project_service.require_member(
                ProjectId(UUID(request.project_id)), user_id
            )
            tasks = await self.task_service.list_project_tasks(project.id)
        else:
            projects = await self.project_service.list_projects_for_user(user_id)
            tasks = await self.task_service.list_visible_tasks(
                user_id, [p.id for p in projects]
            )

        return ListTasksResponse(tasks=[task_view(t) for t in tasks])
