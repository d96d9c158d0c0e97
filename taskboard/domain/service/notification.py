"""Invite notification domain service."""

from abc import ABC, abstractmethod

import logfire

from taskboard.domain.model.common import DomainModel
from taskboard.domain.model.invite import Invite
from taskboard.domain.model.project import Project

from .base import Service


class InviteDelivery(DomainModel):
    """Outcome of a best-effort invite email."""

    sent: bool
    preview_url: str | None = None


class InviteNotifier(ABC):
    """Gateway that delivers invite emails.

    Implementations live in the adapter layer, one per environment.
    """

    @abstractmethod
    async def send_invite(
        self, email: str, accept_url: str, project_name: str
    ) -> str | None:
        """Deliver an invite.

        Args:
            email: Recipient address
            accept_url: Link that accepts the invite
            project_name: Name of the project the recipient is invited to

        Returns:
            A preview URL for the sent message when the transport offers one

        Raises:
            Exception: Any delivery failure
        """
        pass


class InviteNotificationService(Service):
    """Best-effort invite delivery.

    Mail failures are logged and swallowed: the invite already exists and
    its link can be shared by hand.
    """

    def __init__(self, notifier: InviteNotifier) -> None:
        """Initialize notification service.

        Args:
            notifier: Delivery gateway
        """
        self.notifier = notifier

    async def notify_invite(
        self, invite: Invite, project: Project, accept_url: str
    ) -> InviteDelivery:
        """Send the invite email, never raising.

        Args:
            invite: Saved invite
            project: Project the invite is for
            accept_url: Link that accepts the invite

        Returns:
            Whether the email went out, with the preview URL if any
        """
        with logfire.span(
            "notification_service.notify_invite",
            invite_id=str(invite.id),
            project_id=str(project.id),
        ):
            try:
                preview = await self.notifier.send_invite(
                    invite.email.root, accept_url, project.name
                )
            except Exception as e:
                logfire.error(
                    "Invite email failed, continuing without email",
                    invite_id=str(invite.id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return InviteDelivery(sent=False)

            logfire.info(
                "Invite email sent",
                invite_id=str(invite.id),
                has_preview=preview is not None,
            )
            return InviteDelivery(sent=True, preview_url=preview)
