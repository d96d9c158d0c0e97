"""Accept invite use case."""

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import ProjectView, project_view
from taskboard.domain.error import AuthenticationRequiredError, ValidationError
from taskboard.domain.model import InviteGrant
from taskboard.domain.service import InviteService, role_of
from taskboard.domain.value import AccessToken, Role
from taskboard.util.observability import mask_token


class AcceptInviteRequest(BaseModel):
    """Accept invite request."""

    token: str | None
    user_id: str | None  # None when the caller sent no valid bearer token


class AcceptInviteResponse(BaseModel):
    """Accept invite response."""

    message: str
    project: ProjectView
    role: Role


def parse_access_token(token: str | None) -> AccessToken:
    """Validate a raw invite or share-link token.

    Raises:
        ValidationError: If the token is missing or malformed
    """
    if not token:
        raise ValidationError("Token required")
    try:
        return AccessToken(token)
    except ValueError:
        raise ValidationError("Invalid token")


class AcceptInviteUseCase(BaseUseCase):
    """Use case for joining a project through an invite or share link.

    Checks run in a fixed order: token present, token known, grant usable,
    caller identified. An anonymous caller holding a dead invite therefore
    learns the invite is dead rather than being asked to sign in.
    """

    def __init__(self, invite_service: InviteService) -> None:
        """Initialize accept invite use case.

        Args:
            invite_service: Invite domain service
        """
        self.invite_service = invite_service

    async def execute(self, request: AcceptInviteRequest) -> AcceptInviteResponse:
        """Accept a token as the caller.

        Raises:
            ValidationError: If the token is missing or malformed
            NotFoundError: If the token matches nothing
            InviteNotPendingError: If the invite was already used or revoked
            InviteExpiredError: If the invite expired
            AuthenticationRequiredError: If the caller is anonymous
        """
        token = parse_access_token(request.token)

        with logfire.span("accept_invite", token=mask_token(token.root)):
            grant = await self.invite_service.resolve_grant(token)
            self.invite_service.ensure_usable(grant)

            if request.user_id is None:
                logfire.warn(
                    "Anonymous invite acceptance rejected",
                    project_id=str(grant.project.id),
                )
                raise AuthenticationRequiredError(
                    "Authentication required to accept invite"
                )
            user_id = parse_user_id(request.user_id)

            project = await self.invite_service.accept(grant, user_id)
            role = role_of(project, user_id) or Role.EDITOR

            logfire.info(
                "Invite accepted",
                kind=grant.kind,
                invite_id=str(grant.invite.id)
                if isinstance(grant, InviteGrant)
                else None,
                project_id=str(project.id),
                user_id=request.user_id,
                role=role.value,
            )
            return AcceptInviteResponse(
                message="Joined project", project=project_view(project), role=role
            )
