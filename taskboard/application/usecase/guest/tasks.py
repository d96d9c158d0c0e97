"""Guest task use cases.

A guest token grants editor-level access to the tasks of one project.
Guests have no identity, so tasks they create are owned by the project
owner.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel

from taskboard.application.usecase.base import BaseUseCase
from taskboard.application.usecase.invite.accept_invite import parse_access_token
from taskboard.application.usecase.task.fields import NewTaskFields, TaskChanges
from taskboard.application.usecase.view import TaskView, task_view
from taskboard.domain.error import ForbiddenError, NotFoundError
from taskboard.domain.model import Project, Task
from taskboard.domain.service import InviteService, TaskService
from taskboard.domain.value import TaskId, TaskPriority
from taskboard.util.observability import mask_token


class GuestTaskListRequest(BaseModel):
    """List guest tasks request."""

    token: str | None


class GuestTaskListResponse(BaseModel):
    """Tasks of the granted project."""

    tasks: list[TaskView]


class GuestCreateTaskRequest(BaseModel):
    """Create guest task request."""

    token: str | None
    fields: NewTaskFields


class GuestUpdateTaskRequest(BaseModel):
    """Update guest task request."""

    token: str | None
    task_id: str
    changes: TaskChanges


class GuestDeleteTaskRequest(BaseModel):
    """Delete guest task request."""

    token: str | None
    task_id: str


class GuestDeleteTaskResponse(BaseModel):
    """Delete guest task response."""

    task_id: str
    deleted: bool = True


class _GuestTaskUseCase(BaseUseCase):
    def __init__(
        self, invite_service: InviteService, task_service: TaskService
    ) -> None:
        """Initialize guest task use case.

        Args:
            invite_service: Invite domain service (token resolution)
            task_service: Task domain service
        """
        self.invite_service = invite_service
        self.task_service = task_service

    async def _project(self, token: str | None) -> Project:
        return await self.invite_service.resolve_guest_project(
            parse_access_token(token)
        )

    async def _task_in(self, project: Project, task_id: str) -> Task:
        """Load a task of the granted project.

        Raises:
            NotFoundError: If the task does not exist
            ForbiddenError: If the task belongs elsewhere
        """
        task = await self.task_service.get_task(TaskId(UUID(task_id)))
        if task is None:
            raise NotFoundError("Task", task_id)
        if task.project_id != project.id:
            logfire.warn(
                "Guest touched task of another project",
                task_id=task_id,
                project_id=str(project.id),
            )
            raise ForbiddenError("Task not in this project", "task", task_id)
        return task


class ListGuestTasksUseCase(_GuestTaskUseCase):
    """List tasks of the granted project."""

    async def execute(self, request: GuestTaskListRequest) -> GuestTaskListResponse:
        project = await self._project(request.token)
        tasks = await self.task_service.list_project_tasks(project.id)
        return GuestTaskListResponse(tasks=[task_view(t) for t in tasks])


class CreateGuestTaskUseCase(_GuestTaskUseCase):
    """Create a task in the granted project on the owner's behalf."""

    async def execute(self, request: GuestCreateTaskRequest) -> TaskView:
        project = await self._project(request.token)
        fields = request.fields
        with logfire.span(
            "guest_create_task",
            project_id=str(project.id),
            token=mask_token(request.token),
        ):
            task = await self.task_service.create_task(
                owner_id=project.owner_id,
                title=fields.title,
                project_id=project.id,
                description=fields.description,
                priority=fields.priority or TaskPriority.MEDIUM,
                due_date=fields.due_date,
                tags=fields.tags,
                completed=fields.completed,
            )
            return task_view(task)


class UpdateGuestTaskUseCase(_GuestTaskUseCase):
    """Edit a task of the granted project."""

    async def execute(self, request: GuestUpdateTaskRequest) -> TaskView:
        project = await self._project(request.token)
        with logfire.span(
            "guest_update_task", project_id=str(project.id), task_id=request.task_id
        ):
            task = await self._task_in(project, request.task_id)
            updated = await self.task_service.update_task(
                task, request.changes.as_update()
            )
            return task_view(updated)


class DeleteGuestTaskUseCase(_GuestTaskUseCase):
    """Delete a task of the granted project."""

    async def execute(self, request: GuestDeleteTaskRequest) -> GuestDeleteTaskResponse:
        project = await self._project(request.token)
        with logfire.span(
            "guest_delete_task", project_id=str(project.id), task_id=request.task_id
        ):
            task = await self._task_in(project, request.task_id)
            await self.task_service.delete_task(task)
            return GuestDeleteTaskResponse(task_id=request.task_id)
