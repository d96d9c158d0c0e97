"""Invite email adapter."""

from .notifier import (
    ConsoleInviteNotifier,
    MockInviteNotifier,
    SentInvite,
    SmtpInviteNotifier,
    build_invite_message,
)

__all__ = [
    "ConsoleInviteNotifier",
    "MockInviteNotifier",
    "SentInvite",
    "SmtpInviteNotifier",
    "build_invite_message",
]
