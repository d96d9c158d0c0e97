"""Share link use cases."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import ShareLinkView, share_link_view
from taskboard.config import Settings
from taskboard.domain.service import ProjectService
from taskboard.domain.value import ProjectId


class ShareLinkRequest(BaseModel):
    """Share link request."""

    project_id: str
    user_id: str  # Must be the owner


class ShareLinkResponse(BaseModel):
    """Share link response."""

    project_id: str
    share_link: ShareLinkView


class GetShareLinkUseCase(BaseUseCase):
    """Use case for reading the share link, issuing one on first use."""

    def __init__(self, project_service: ProjectService, settings: Settings) -> None:
        self.project_service = project_service
        self.settings = settings

    async def execute(self, request: ShareLinkRequest) -> ShareLinkResponse:
        """Get or issue the project's share link.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not the owner
        """
        project_id = ProjectId(UUID(request.project_id))
        user_id = parse_user_id(request.user_id)

        with logfire.span("get_share_link", project_id=request.project_id):
            project = await self.project_service.require_owner(
                project_id, user_id, "Only owner can manage the share link"
            )
            project = await self.project_service.get_or_create_share_link(project)
            return _response(project, self.settings)


class ResetShareLinkUseCase(BaseUseCase):
    """Use case for replacing the share link."""

    def __init__(self, project_service: ProjectService, settings: Settings) -> None:
        self.project_service = project_service
        self.settings = settings

    async def execute(self, request: ShareLinkRequest) -> ShareLinkResponse:
        """Replace the project's share link; the old link stops working.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not the owner
        """
        project_id = ProjectId(UUID(request.project_id))
        user_id = parse_user_id(request.user_id)

        with logfire.span("reset_share_link", project_id=request.project_id):
            project = await self.project_service.require_owner(
                project_id, user_id, "Only owner can manage the share link"
            )
            project = await self.project_service.reset_share_link(project)
            return _response(project, self.settings)


def _response(project, settings: Settings) -> ShareLinkResponse:
    url = settings.invite_accept_url(project.invite_token.root)
    return ShareLinkResponse(
        project_id=str(project.id), share_link=share_link_view(project, url)
    )
