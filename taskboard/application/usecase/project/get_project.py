"""Get project use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import (
    InviteView,
    ProjectView,
    ShareLinkView,
    invite_view,
    project_view,
    share_link_view,
)
from taskboard.config import Settings
from taskboard.domain.service import InviteService, ProjectService
from taskboard.domain.value import ProjectId, Role


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: str
    user_id: str


class GetProjectResponse(BaseModel):
    """Project detail.

    ``pending_invites`` and ``share_link`` are only filled in for the owner.
    """

    project: ProjectView
    role: Role
    pending_invites: list[InviteView] | None = None
    share_link: ShareLinkView | None = None


class GetProjectUseCase(BaseUseCase):
    """Use case for reading a project as a member."""

    def __init__(
        self,
        project_service: ProjectService,
        invite_service: InviteService,
        settings: Settings,
    ) -> None:
        """Initialize get project use case.

        Args:
            project_service: Project domain service
            invite_service: Invite domain service
            settings: Application settings (for share-link URLs)
        """
        self.project_service = project_service
        self.invite_service = invite_service
        self.settings = settings

    async def execute(self, request: GetProjectRequest) -> GetProjectResponse:
        """Get project detail.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not a member
        """
        project_id = ProjectId(UUID(request.project_id))
        user_id = parse_user_id(request.user_id)

        with logfire.span(
            "get_project", project_id=request.project_id, user_id=request.user_id
        ):
            project, role = await self.project_service.require_member(
                project_id, user_id
            )

            response = GetProjectResponse(project=project_view(project), role=role)
            if role != Role.OWNER:
                return response

            invites = await self.invite_service.list_pending_invites(project)
            response.pending_invites = [invite_view(i) for i in invites]
            if project.invite_token is not None:
                response.share_link = share_link_view(
                    project, self.settings.invite_accept_url(project.invite_token.root)
                )
            return response
