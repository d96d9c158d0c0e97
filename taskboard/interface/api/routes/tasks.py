"""Task routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Query, status

from taskboard.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskUseCase,
    DeleteTaskRequest,
    DeleteTaskResponse,
    DeleteTaskUseCase,
    GetTaskRequest,
    GetTaskUseCase,
    ListTasksRequest,
    ListTasksResponse,
    ListTasksUseCase,
    NewTaskFields,
    TaskChanges,
    UpdateTaskRequest,
    UpdateTaskUseCase,
)
from taskboard.application.usecase.view import TaskView
from taskboard.domain.error import DomainError
from taskboard.domain.service import JWTService
from taskboard.interface.api.auth import require_user_id
from taskboard.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/tasks", tags=["tasks"], route_class=DishkaRoute)


class CreateTaskAPIRequest(NewTaskFields):
    """API request for creating a task."""

    project_id: UUID | None = None


@router.post("", response_model=TaskView, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskAPIRequest,
    create_task_use_case: FromDishka[CreateTaskUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> TaskView:
    """Create a personal task, or a project task as owner or editor.

    Raises:
        HTTPException: 404 project, 403 not allowed to edit the project
    """
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await create_task_use_case.execute(
            CreateTaskRequest(
                user_id=user_id,
                project_id=str(request.project_id) if request.project_id else None,
                fields=NewTaskFields.model_validate(
                    request.model_dump(exclude={"project_id"})
                ),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Task creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("create task", e) from e


@router.get("", response_model=ListTasksResponse)
async def list_tasks(
    list_tasks_use_case: FromDishka[ListTasksUseCase],
    jwt_service: FromDishka[JWTService],
    project_id: UUID | None = Query(default=None),
    authorization: str | None = Header(default=None),
) -> ListTasksResponse:
    """List the caller's tasks, or the tasks of one project."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await list_tasks_use_case.execute(
            ListTasksRequest(
                user_id=user_id,
                project_id=str(project_id) if project_id else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("list tasks", e) from e


@router.get("/{task_id}", response_model=TaskView)
async def get_task(
    task_id: UUID,
    get_task_use_case: FromDishka[GetTaskUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> TaskView:
    """Get a task."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await get_task_use_case.execute(
            GetTaskRequest(task_id=str(task_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("get task", e) from e


@router.patch("/{task_id}", response_model=TaskView)
async def update_task(
    task_id: UUID,
    request: TaskChanges,
    update_task_use_case: FromDishka[UpdateTaskUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> TaskView:
    """Edit a task. Viewers are refused."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await update_task_use_case.execute(
            UpdateTaskRequest(task_id=str(task_id), user_id=user_id, changes=request)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Task update validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("update task", e) from e


@router.delete("/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(
    task_id: UUID,
    delete_task_use_case: FromDishka[DeleteTaskUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteTaskResponse:
    """Delete a task. Viewers are refused."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await delete_task_use_case.execute(
            DeleteTaskRequest(task_id=str(task_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("delete task", e) from e
