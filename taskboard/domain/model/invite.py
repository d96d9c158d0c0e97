"""Invite entity.

A targeted, single-use, expiring grant to join a project. Distinct from the
project's standing share link.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from taskboard.domain.model.common import DomainModel, utcnow
from taskboard.domain.value import (
    AccessToken,
    Email,
    InviteId,
    InviteStatus,
    ProjectId,
    UserId,
)


class Invite(DomainModel):
    """Invite entity.

    Business rules:
    - Token is unique across all invites
    - pending -> accepted or pending -> revoked, both terminal
    - Expiry is checked lazily when the invite is used
    - The email is informational; any signed-in user holding the token may accept
    """

    id: InviteId
    email: Email
    project_id: ProjectId
    token: AccessToken
    invited_by: UserId
    status: InviteStatus = InviteStatus.PENDING
    expires_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    accepted_at: Optional[datetime] = None
    accepted_by: Optional[UserId] = None

    def is_expired(self, now: datetime) -> bool:
        """Whether the invite is past its expiry at ``now``."""
        return self.expires_at is not None and self.expires_at < now
