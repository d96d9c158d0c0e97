"""Guest access use cases."""

from taskboard.application.usecase.guest.get_project import (
    GetGuestProjectUseCase,
    GuestProjectRequest,
    GuestProjectResponse,
)
from taskboard.application.usecase.guest.tasks import (
    CreateGuestTaskUseCase,
    DeleteGuestTaskUseCase,
    GuestCreateTaskRequest,
    GuestDeleteTaskRequest,
    GuestDeleteTaskResponse,
    GuestTaskListRequest,
    GuestTaskListResponse,
    GuestUpdateTaskRequest,
    ListGuestTasksUseCase,
    UpdateGuestTaskUseCase,
)

__all__ = [
    "CreateGuestTaskUseCase",
    "DeleteGuestTaskUseCase",
    "GetGuestProjectUseCase",
    "GuestCreateTaskRequest",
    "GuestDeleteTaskRequest",
    "GuestDeleteTaskResponse",
    "GuestProjectRequest",
    "GuestProjectResponse",
    "GuestTaskListRequest",
    "GuestTaskListResponse",
    "GuestUpdateTaskRequest",
    "ListGuestTasksUseCase",
    "UpdateGuestTaskUseCase",
]
