"""Create project use case."""

import logfire
from pydantic import BaseModel, Field

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import ProjectView, project_view
from taskboard.domain.service import ProjectService
from taskboard.domain.value import Role


class CreateProjectRequest(BaseModel):
    """Create project request."""

    user_id: str  # Creator, becomes owner
    name: str = Field(min_length=1, max_length=200)


class CreateProjectResponse(BaseModel):
    """Create project response."""

    project: ProjectView
    role: Role


class CreateProjectUseCase(BaseUseCase):
    """Use case for creating a project."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize create project use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(self, request: CreateProjectRequest) -> CreateProjectResponse:
        """Create a project owned by the caller."""
        owner_id = parse_user_id(request.user_id)

        with logfire.span("create_project", owner_id=request.user_id):
            project = await self.project_service.create_project(
                request.name.strip(), owner_id
            )
            return CreateProjectResponse(project=project_view(project), role=Role.OWNER)
