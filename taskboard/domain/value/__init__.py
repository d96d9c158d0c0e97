"""Domain value objects for Taskboard."""

from taskboard.domain.value.identifiers import (
    InviteId,
    ProjectId,
    TaskId,
    UserId,
)
from taskboard.domain.value.types import (
    AccessToken,
    Email,
    InviteStatus,
    Role,
    TaskEventType,
    TaskPriority,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "InviteId",
    "TaskId",
    # Types
    "AccessToken",
    "Email",
    "InviteStatus",
    "Role",
    "TaskEventType",
    "TaskPriority",
]
