"""Email infrastructure providers."""

from dishka import Scope, provide

from taskboard.adapter.email import ConsoleInviteNotifier, SmtpInviteNotifier
from taskboard.config import EmailSettings
from taskboard.domain.service import InviteNotifier
from taskboard.util.di.base import ProviderBase
from taskboard.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider, picked from ``EMAIL__BACKEND``."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invite_notifier(self, settings: EmailSettings) -> InviteNotifier:
        """Provide the invite notifier.

        Returns:
            SMTP notifier, or a console notifier for local development

        Raises:
            ConfigurationError: If the SMTP backend has no host
        """
        if settings.backend == "smtp":
            if not settings.smtp_host:
                raise ConfigurationError("EMAIL__SMTP_HOST must be configured")
            return SmtpInviteNotifier(settings)
        return ConsoleInviteNotifier()
