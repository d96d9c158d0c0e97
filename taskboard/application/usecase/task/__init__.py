"""Task use cases."""

from taskboard.application.usecase.task.create_task import (
    CreateTaskRequest,
    CreateTaskUseCase,
)
from taskboard.application.usecase.task.delete_task import (
    DeleteTaskRequest,
    DeleteTaskResponse,
    DeleteTaskUseCase,
)
from taskboard.application.usecase.task.fields import NewTaskFields, TaskChanges
from taskboard.application.usecase.task.get_task import GetTaskRequest, GetTaskUseCase
from taskboard.application.usecase.task.list_tasks import (
    ListTasksRequest,
    ListTasksResponse,
    ListTasksUseCase,
)
from taskboard.application.usecase.task.update_task import (
    UpdateTaskRequest,
    UpdateTaskUseCase,
)

__all__ = [
    "CreateTaskRequest",
    "CreateTaskUseCase",
    "DeleteTaskRequest",
    "DeleteTaskResponse",
    "DeleteTaskUseCase",
    "GetTaskRequest",
    "GetTaskUseCase",
    "ListTasksRequest",
    "ListTasksResponse",
    "ListTasksUseCase",
    "NewTaskFields",
    "TaskChanges",
    "UpdateTaskRequest",
    "UpdateTaskUseCase",
]
