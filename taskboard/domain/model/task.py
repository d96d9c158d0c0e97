"""Task entity.

Only the ownership fields matter to access control; the rest is content.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from taskboard.domain.model.common import DomainModel, utcnow
from taskboard.domain.value import ProjectId, TaskId, TaskPriority, UserId


class Task(DomainModel):
    """Task entity.

    Personal when ``project_id`` is None, otherwise governed by the
    project's membership.
    """

    id: TaskId
    title: str = Field(min_length=1, max_length=500)
    description: str = Field(default="", max_length=10000)
    priority: TaskPriority = TaskPriority.LOW
    due_date: Optional[datetime] = None
    tags: list[str] = Field(default_factory=list)
    completed: bool = False
    completed_at: Optional[datetime] = None
    owner_id: UserId
    project_id: Optional[ProjectId] = None
    created_at: datetime = Field(default_factory=utcnow)
