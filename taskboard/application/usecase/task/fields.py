"""Task input models shared by member and guest use cases."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from taskboard.domain.value import TaskPriority


class NewTaskFields(BaseModel):
    """Content of a task being created."""

    title: str = Field(min_length=1, max_length=500)
    description: str = Field(default="", max_length=10000)
    priority: TaskPriority | None = None  # Default depends on who creates it
    due_date: datetime | None = None
    tags: list[str] = Field(default_factory=list, max_length=20)
    completed: bool = False


class TaskChanges(BaseModel):
    """Partial task update. Only fields that were sent are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=10000)
    priority: TaskPriority | None = None
    due_date: datetime | None = None
    tags: list[str] | None = Field(default=None, max_length=20)
    completed: bool | None = None

    def as_update(self) -> dict[str, Any]:
        """Fields explicitly set, dropping nulls for non-nullable fields."""
        update = self.model_dump(exclude_unset=True)
        return {
            k: v for k, v in update.items() if v is not None or k == "due_date"
        }
