"""List projects use case."""

from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import ProjectView, project_view
from taskboard.domain.service import ProjectService, role_of
from taskboard.domain.value import Role


class ListProjectsRequest(BaseModel):
    """List projects request."""

    user_id: str


class ProjectListItem(BaseModel):
    """Project with the caller's role."""

    project: ProjectView
    role: Role


class ListProjectsResponse(BaseModel):
    """List projects response."""

    projects: list[ProjectListItem]


class ListProjectsUseCase(BaseUseCase):
    """Use case for listing the projects a user owns or belongs to."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: ListProjectsRequest) -> ListProjectsResponse:
        """List projects, newest first."""
        user_id = parse_user_id(request.user_id)
        projects = await self.project_service.list_projects_for_user(user_id)

        items = []
        for project in projects:
            role = role_of(project, user_id)
            if role is None:
                continue
            items.append(ProjectListItem(project=project_view(project), role=role))
        return ListProjectsResponse(projects=items)
