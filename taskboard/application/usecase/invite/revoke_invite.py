"""Revoke invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import InviteView, invite_view
from taskboard.domain.error import NotFoundError
from taskboard.domain.service import InviteService, ProjectService
from taskboard.domain.value import InviteId


class RevokeInviteRequest(BaseModel):
    """Revoke invite request."""

    invite_id: str
    user_id: str  # Must own the invite's project


class RevokeInviteResponse(BaseModel):
    """Revoke invite response."""

    invite: InviteView


class RevokeInviteUseCase(BaseUseCase):
    """Use case for revoking a pending invite."""

    def __init__(
        self, invite_service: InviteService, project_service: ProjectService
    ) -> None:
        self.invite_service = invite_service
        self.project_service = project_service

    async def execute(self, request: RevokeInviteRequest) -> RevokeInviteResponse:
        """Revoke an invite.

        Raises:
            NotFoundError: If the invite or its project does not exist
            ForbiddenError: If the caller is not the project owner
            InviteNotPendingError: If the invite is no longer pending
        """
        invite_id = InviteId(UUID(request.invite_id))
        user_id = parse_user_id(request.user_id)

        with logfire.span("revoke_invite", invite_id=request.invite_id):
            invite = await self.invite_service.get_invite(invite_id)
            if invite is None:
                raise NotFoundError("Invite", request.invite_id)

            await self.project_service.require_owner(
                invite.project_id, user_id, "Only owner can revoke invites"
            )
            revoked = await self.invite_service.revoke(invite)
            return RevokeInviteResponse(invite=invite_view(revoked))
