"""Domain value objects for Taskboard.

Value objects are immutable and defined by their values, not identity.
"""

import re
import secrets
from enum import Enum

from pydantic import field_validator

from taskboard.domain.value.common import RootValueObject


class Role(str, Enum):
    """Role of a user within a project."""

    OWNER = "owner"
    EDITOR = "editor"
    VIEWER = "viewer"


class InviteStatus(str, Enum):
    """Status of a targeted invite.

    ``expired`` is not a status: it is derived from ``expires_at`` when the
    invite is used.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REVOKED = "revoked"


class TaskPriority(str, Enum):
    """Priority of a task."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskEventType(str, Enum):
    """Kind of realtime task event."""

    CREATED = "task.created"
    UPDATED = "task.updated"
    DELETED = "task.deleted"


class AccessToken(RootValueObject[str]):
    """Opaque URL-safe token.

    Used both for targeted invites and for a project's standing share link.
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is non-empty and URL-safe."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        if not re.match(r"^[A-Za-z0-9_-]+$", v):
            raise ValueError("Token must be URL-safe")
        return v

    @classmethod
    def generate(cls, nbytes: int = 20) -> "AccessToken":
        """Generate a random hex token with ``nbytes`` bytes of entropy."""
        return cls(secrets.token_hex(nbytes))


class Email(RootValueObject[str]):
    """Invite recipient address.

    Informational only: acceptance is not restricted to this address.
    """

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate a plausible address and normalize case."""
        v = v.strip()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        if len(v) > 320:
            raise ValueError("Email must be at most 320 characters")
        return v.lower()
