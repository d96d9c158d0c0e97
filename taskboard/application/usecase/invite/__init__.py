"""Invite use cases."""

from taskboard.application.usecase.invite.accept_invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    parse_access_token,
)
from taskboard.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
)
from taskboard.application.usecase.invite.revoke_invite import (
    RevokeInviteRequest,
    RevokeInviteResponse,
    RevokeInviteUseCase,
)

__all__ = [
    "AcceptInviteRequest",
    "AcceptInviteResponse",
    "AcceptInviteUseCase",
    "CreateInviteRequest",
    "CreateInviteResponse",
    "CreateInviteUseCase",
    "RevokeInviteRequest",
    "RevokeInviteResponse",
    "RevokeInviteUseCase",
    "parse_access_token",
]
