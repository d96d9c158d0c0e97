"""Domain model entities for Taskboard."""

from taskboard.domain.model.access import (
    AccessGrant,
    InviteGrant,
    ShareLinkGrant,
    TaskAccess,
    TaskAccessStatus,
)
from taskboard.domain.model.event import TaskEvent
from taskboard.domain.model.invite import Invite
from taskboard.domain.model.project import Project, ProjectMember
from taskboard.domain.model.task import Task

__all__ = [
    "AccessGrant",
    "Invite",
    "InviteGrant",
    "Project",
    "ProjectMember",
    "ShareLinkGrant",
    "Task",
    "TaskAccess",
    "TaskAccessStatus",
    "TaskEvent",
]
