"""Realtime task event."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from taskboard.domain.model.common import DomainModel, utcnow
from taskboard.domain.value import ProjectId, TaskEventType, TaskId


class TaskEvent(DomainModel):
    """Advisory notice that a project task changed.

    Subscribers should refetch on receipt; events are not authoritative.
    """

    type: TaskEventType
    project_id: ProjectId
    task_id: TaskId
    task: Optional[dict[str, Any]] = None  # Serialized task, absent on delete
    occurred_at: datetime = Field(default_factory=utcnow)

    @property
    def channel(self) -> str:
        """Project-scoped channel name."""
        return f"project_{self.project_id}"
