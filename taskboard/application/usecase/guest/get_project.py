"""Guest project view use case."""

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase
from taskboard.application.usecase.invite.accept_invite import parse_access_token
from taskboard.application.usecase.view import ProjectView, project_view
from taskboard.domain.service import InviteService
from taskboard.util.observability import mask_token


class GuestProjectRequest(BaseModel):
    """Guest request carrying only an access token."""

    token: str | None


class GuestProjectResponse(BaseModel):
    """Read-only project view for a guest."""

    project: ProjectView


class GetGuestProjectUseCase(BaseUseCase):
    """Use case for opening a project through a token, without an account."""

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize guest project use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: GuestProjectRequest) -> GuestProjectResponse:
        """Resolve the token to its project.

        Raises:
            ValidationError: If the token is missing or malformed
            NotFoundError: If the token matches nothing
            InvalidStateError: If it is a used, revoked or expired invite
        """
        token = parse_access_token(request.token)
        with logfire.span("guest_get_project", token=mask_token(token.root)):
            project = await self.invite_service.resolve_guest_project(token)
            return GuestProjectResponse(project=project_view(project))
