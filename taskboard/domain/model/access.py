"""Access grants and task access classification.

Two kinds of token open a project:

- ``InviteGrant``: a targeted invite, single-use and expiring
- ``ShareLinkGrant``: the project's standing share link, guest access

They are kept as separate variants so the resolution order (invite first,
then share link) is explicit in one place.
"""

from enum import Enum
from typing import Literal, Optional, Union

from taskboard.domain.model.common import DomainModel
from taskboard.domain.model.invite import Invite
from taskboard.domain.model.project import Project
from taskboard.domain.value import Role


class InviteGrant(DomainModel):
    """Token matched a targeted invite."""

    kind: Literal["invite"] = "invite"
    invite: Invite
    project: Project


class ShareLinkGrant(DomainModel):
    """Token matched a project's live share link."""

    kind: Literal["share_link"] = "share_link"
    project: Project


AccessGrant = Union[InviteGrant, ShareLinkGrant]


class TaskAccessStatus(str, Enum):
    """Outcome of resolving a caller's access to a task."""

    GRANTED = "granted"
    TASK_NOT_FOUND = "task_not_found"
    PROJECT_NOT_FOUND = "project_not_found"
    FORBIDDEN = "forbidden"


class TaskAccess(DomainModel):
    """Classification of a caller's access to a task.

    ``role`` is only set when access is granted.
    """

    status: TaskAccessStatus
    role: Optional[Role] = None

    @property
    def granted(self) -> bool:
        return self.status == TaskAccessStatus.GRANTED

    @property
    def can_write(self) -> bool:
        return self.granted and self.role in (Role.OWNER, Role.EDITOR)
