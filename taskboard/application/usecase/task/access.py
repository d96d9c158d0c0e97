"""Task access checks shared by the member task use cases."""

import logfire

from taskboard.domain.error import ForbiddenError, NotFoundError
from taskboard.domain.model import Task, TaskAccess, TaskAccessStatus
from taskboard.domain.service import ProjectService, TaskService, resolve_task_access
from taskboard.domain.value import TaskId, UserId


async def load_task_access(
    task_service: TaskService,
    project_service: ProjectService,
    task_id: TaskId,
    user_id: UserId,
    write: bool = False,
) -> tuple[Task, TaskAccess]:
    """Load a task and check the caller may read (or write) it.

    Raises:
        NotFoundError: If the task, or the project it belongs to, is absent
        ForbiddenError: If the caller has no role, or only a read role for a write
    """
    task = await task_service.get_task(task_id)
    project = None
    if task is not None and task.project_id is not None:
        project = await project_service.get_project(task.project_id)

    access = resolve_task_access(task, project, user_id)

    if access.status == TaskAccessStatus.TASK_NOT_FOUND:
        raise NotFoundError("Task", str(task_id))
    if access.status == TaskAccessStatus.PROJECT_NOT_FOUND:
        raise NotFoundError("Project", str(task.project_id))
    if access.status == TaskAccessStatus.FORBIDDEN:
        logfire.warn("Task access denied", task_id=str(task_id), user_id=str(user_id))
        message = "Not a project member" if task.project_id else "Not your task"
        raise ForbiddenError(message, "task", str(task_id))
    if write and not access.can_write:
        logfire.warn(
            "Task write denied",
            task_id=str(task_id),
            user_id=str(user_id),
            role=access.role.value if access.role else None,
        )
        raise ForbiddenError("Viewers cannot modify tasks", "task", str(task_id))

    return task, access
