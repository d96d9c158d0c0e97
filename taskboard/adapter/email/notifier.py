"""Invite email delivery.

The SMTP client is blocking, so each send runs in a worker thread.
"""

import asyncio
import html
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

import logfire

from taskboard.adapter.error import NotificationError
from taskboard.config import EmailSettings
from taskboard.domain.service.notification import InviteNotifier


def build_invite_message(
    settings: EmailSettings, email: str, accept_url: str, project_name: str
) -> EmailMessage:
    """Compose the invite email with plain-text and HTML parts."""
    msg = EmailMessage()
    msg["From"] = settings.from_address
    msg["To"] = email
    msg["Subject"] = settings.invite_subject

    msg.set_content(
        f"You have been invited to collaborate on the project {project_name!r}.\n\n"
        f"Accept the invite: {accept_url}\n"
    )
    msg.add_alternative(
        f"<p>You have been invited to collaborate on the project "
        f"<strong>{html.escape(project_name)}</strong>.</p>"
        f'<p><a href="{html.escape(accept_url)}">Accept invite</a></p>',
        subtype="html",
    )
    return msg


class SmtpInviteNotifier(InviteNotifier):
    """Sends invites through an SMTP relay."""

    def __init__(self, settings: EmailSettings) -> None:
        """Initialize notifier.

        Args:
            settings: Email settings with at least ``smtp_host``
        """
        self.settings = settings

    def _send(self, msg: EmailMessage) -> None:
        s = self.settings
        smtp_cls = smtplib.SMTP_SSL if s.smtp_use_tls else smtplib.SMTP
        with smtp_cls(s.smtp_host, s.smtp_port, timeout=s.smtp_timeout) as server:
            if not s.smtp_use_tls and s.smtp_user and s.smtp_password:
                server.starttls()
            if s.smtp_user and s.smtp_password:
                server.login(s.smtp_user, s.smtp_password)
            server.send_message(msg)

    async def send_invite(
        self, email: str, accept_url: str, project_name: str
    ) -> str | None:
        """Send the invite email.

        Raises:
            NotificationError: If the relay rejects or cannot be reached
        """
        msg = build_invite_message(self.settings, email, accept_url, project_name)
        with logfire.span("smtp.send_invite", smtp_host=self.settings.smtp_host):
            try:
                await asyncio.to_thread(self._send, msg)
            except (smtplib.SMTPException, OSError) as e:
                raise NotificationError(f"SMTP delivery failed: {e}") from e
        # SMTP relays do not offer message previews
        return None


class ConsoleInviteNotifier(InviteNotifier):
    """Logs the accept link instead of sending mail. For local development."""

    async def send_invite(
        self, email: str, accept_url: str, project_name: str
    ) -> str | None:
        """Log the invite link."""
        logfire.info(
            "Invite email (console backend)",
            to=email,
            project_name=project_name,
            accept_url=accept_url,
        )
        return None


@dataclass(frozen=True)
class SentInvite:
    """An invite captured by :class:`MockInviteNotifier`."""

    email: str
    accept_url: str
    project_name: str


class MockInviteNotifier(InviteNotifier):
    """Records invites in memory for testing.

    With ``fail=True`` every send raises, to exercise the non-fatal path.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[SentInvite] = []

    async def send_invite(
        self, email: str, accept_url: str, project_name: str
    ) -> str | None:
        """Record the invite and return a fake preview URL."""
        if self.fail:
            raise NotificationError("Mock delivery failure")
        self.sent.append(SentInvite(email, accept_url, project_name))
        return f"https://mail.example.test/preview/{len(self.sent)}"
