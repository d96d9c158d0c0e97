"""Create invite use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase, parse_user_id
from taskboard.application.usecase.view import InviteView, invite_view
from taskboard.config import Settings
from taskboard.domain.error import ValidationError
from taskboard.domain.repository import UnitOfWork
from taskboard.domain.service import (
    InviteNotificationService,
    InviteService,
    ProjectService,
)
from taskboard.domain.value import Email, ProjectId


class CreateInviteRequest(BaseModel):
    """Create invite request."""

    project_id: str
    user_id: str  # Must be the owner
    email: str


class CreateInviteResponse(BaseModel):
    """Create invite response.

    The token and URL are returned even when the email could not be sent,
    so the owner can share the link by hand.
    """

    invite: InviteView
    token: str
    accept_url: str
    email_sent: bool
    preview_url: str | None = None


class CreateInviteUseCase(BaseUseCase):
    """Use case for inviting someone to a project by email."""

    def __init__(
        self,
        project_service: ProjectService,
        invite_service: InviteService,
        notification_service: InviteNotificationService,
        unit_of_work: UnitOfWork,
        settings: Settings,
    ) -> None:
        """Initialize create invite use case.

        Args:
            project_service: Project domain service
            invite_service: Invite domain service
            notification_service: Best-effort invite email sender
            unit_of_work: Commit boundary of the request
            settings: Application settings (for accept URLs)
        """
        self.project_service = project_service
        self.invite_service = invite_service
        self.notification_service = notification_service
        self.unit_of_work = unit_of_work
        self.settings = settings

    async def execute(self, request: CreateInviteRequest) -> CreateInviteResponse:
        """Create an invite and email its link.

        Raises:
            ValidationError: If the email is malformed
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not the owner
        """
        try:
            email = Email(request.email)
        except ValueError:
            raise ValidationError(f"Invalid email address: {request.email}")

        project_id = ProjectId(UUID(request.project_id))
        user_id = parse_user_id(request.user_id)

        with logfire.span(
            "create_invite", project_id=request.project_id, user_id=request.user_id
        ):
            project = await self.project_service.require_owner(
                project_id, user_id, "Only owner can invite"
            )
            invite = await self.invite_service.create_invite(project, email, user_id)
            # The link in the email must resolve once it arrives
            await self.unit_of_work.commit()

            accept_url = self.settings.invite_accept_url(invite.token.root)
            delivery = await self.notification_service.notify_invite(
                invite, project, accept_url
            )

            return CreateInviteResponse(
                invite=invite_view(invite),
                token=invite.token.root,
                accept_url=accept_url,
                email_sent=delivery.sent,
                preview_url=delivery.preview_url,
            )
