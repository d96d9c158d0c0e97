"""Delete project use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.domain.service import ProjectService
from taskboard.domain.value import ProjectId


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    project_id: str
    user_id: str  # Must be the owner


class DeleteProjectResponse(BaseModel):
    """Delete project response."""

    project_id: str
    deleted: bool = True


class DeleteProjectUseCase(BaseUseCase):
    """Use case for deleting a project with its tasks and invites."""

    def __init__(self, project_service: ProjectService) -> None:
        self.project_service = project_service

    async def execute(self, request: DeleteProjectRequest) -> DeleteProjectResponse:
        """Delete a project.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not the owner
            CascadeDeleteError: If the cascade fails part-way
        """
        project_id = ProjectId(UUID(request.project_id))
        user_id = parse_user_id(request.user_id)

        with logfire.span(
            "delete_project", project_id=request.project_id, user_id=request.user_id
        ):
            await self.project_service.require_owner(
                project_id, user_id, "Only owner can delete project"
            )
            await self.project_service.delete_project(project_id)
            return DeleteProjectResponse(project_id=request.project_id)
