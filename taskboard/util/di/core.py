"""Configuration providers (not mockable)."""

from dishka import Scope, provide

from taskboard.config import (
    AuthSettings,
    EmailSettings,
    InvitationSettings,
    RealtimeSettings,
    Settings,
)
from taskboard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the sections services depend on directly.

    Tests change configuration through environment variables, so there is
    no mock variant.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide
    def provide_email_settings(self, settings: Settings) -> EmailSettings:
        return settings.email

    @provide
    def provide_realtime_settings(self, settings: Settings) -> RealtimeSettings:
        return settings.realtime
