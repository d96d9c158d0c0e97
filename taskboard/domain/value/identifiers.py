"""Strongly typed identifiers for Taskboard domain entities.

User ids are issued by the external identity provider and are always
handled as UUIDs here, never as loosely typed strings.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)
InviteId = NewType("InviteId", UUID)
TaskId = NewType("TaskId", UUID)
