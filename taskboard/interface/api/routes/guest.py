"""Guest routes.

No account needed: the token in the path is the credential. Any
``Authorization`` header is ignored.
"""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from taskboard.application.usecase.guest import (
    CreateGuestTaskUseCase,
    DeleteGuestTaskUseCase,
    GetGuestProjectUseCase,
    GuestCreateTaskRequest,
    GuestDeleteTaskRequest,
    GuestDeleteTaskResponse,
    GuestProjectRequest,
    GuestProjectResponse,
    GuestTaskListRequest,
    GuestTaskListResponse,
    GuestUpdateTaskRequest,
    ListGuestTasksUseCase,
    UpdateGuestTaskUseCase,
)
from taskboard.application.usecase.task import NewTaskFields, TaskChanges
from taskboard.application.usecase.view import TaskView
from taskboard.domain.error import DomainError
from taskboard.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/guest", tags=["guest"], route_class=DishkaRoute)


@router.get("/{token}", response_model=GuestProjectResponse)
async def get_guest_project(
    token: str,
    get_guest_project_use_case: FromDishka[GetGuestProjectUseCase],
) -> GuestProjectResponse:
    """Open a project through an invite or share-link token.

    Raises:
        HTTPException: 404 unknown or replaced token, 400 used or expired invite
    """
    try:
        return await get_guest_project_use_case.execute(
            GuestProjectRequest(token=token)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("load guest project", e) from e


@router.get("/{token}/tasks", response_model=GuestTaskListResponse)
async def list_guest_tasks(
    token: str,
    list_guest_tasks_use_case: FromDishka[ListGuestTasksUseCase],
) -> GuestTaskListResponse:
    """List tasks of the project the token opens."""
    try:
        return await list_guest_tasks_use_case.execute(
            GuestTaskListRequest(token=token)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("list guest tasks", e) from e


@router.post(
    "/{token}/tasks", response_model=TaskView, status_code=status.HTTP_201_CREATED
)
async def create_guest_task(
    token: str,
    request: NewTaskFields,
    create_guest_task_use_case: FromDishka[CreateGuestTaskUseCase],
) -> TaskView:
    """Create a task as a guest. The project owner is recorded as its owner."""
    try:
        return await create_guest_task_use_case.execute(
            GuestCreateTaskRequest(token=token, fields=request)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Guest task validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("create guest task", e) from e


@router.patch("/{token}/tasks/{task_id}", response_model=TaskView)
async def update_guest_task(
    token: str,
    task_id: UUID,
    request: TaskChanges,
    update_guest_task_use_case: FromDishka[UpdateGuestTaskUseCase],
) -> TaskView:
    """Edit a task of the project the token opens.

    Raises:
        HTTPException: 404 task not found, 403 task of another project
    """
    try:
        return await update_guest_task_use_case.execute(
            GuestUpdateTaskRequest(token=token, task_id=str(task_id), changes=request)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Guest task validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("update guest task", e) from e


@router.delete("/{token}/tasks/{task_id}", response_model=GuestDeleteTaskResponse)
async def delete_guest_task(
    token: str,
    task_id: UUID,
    delete_guest_task_use_case: FromDishka[DeleteGuestTaskUseCase],
) -> GuestDeleteTaskResponse:
    """Delete a task of the project the token opens."""
    try:
        return await delete_guest_task_use_case.execute(
            GuestDeleteTaskRequest(token=token, task_id=str(task_id))
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("delete guest task", e) from e
