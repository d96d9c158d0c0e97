"""Project routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from taskboard.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectResponse,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectResponse,
    GetProjectUseCase,
    GetShareLinkUseCase,
    ListProjectsRequest,
    ListProjectsResponse,
    ListProjectsUseCase,
    ResetShareLinkUseCase,
    ShareLinkRequest,
    ShareLinkResponse,
)
from taskboard.domain.error import CascadeDeleteError, DomainError
from taskboard.domain.service import JWTService
from taskboard.interface.api.auth import require_user_id
from taskboard.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/collab/projects", tags=["projects"], route_class=DishkaRoute)


class CreateProjectAPIRequest(BaseModel):
    """API request for creating a project."""

    name: str = Field(min_length=1, max_length=200)


@router.post(
    "", response_model=CreateProjectResponse, status_code=status.HTTP_201_CREATED
)
async def create_project(
    request: CreateProjectAPIRequest,
    create_project_use_case: FromDishka[CreateProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateProjectResponse:
    """Create a project owned by the caller.

    Args:
        request: Project name
        create_project_use_case: Create project use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header

    Returns:
        Created project with the caller's role

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await create_project_use_case.execute(
            CreateProjectRequest(user_id=user_id, name=request.name)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Project creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("create project", e) from e


@router.get("", response_model=ListProjectsResponse)
async def list_projects(
    list_projects_use_case: FromDishka[ListProjectsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ListProjectsResponse:
    """List projects the caller owns or belongs to."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await list_projects_use_case.execute(
            ListProjectsRequest(user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("list projects", e) from e


@router.get("/{project_id}", response_model=GetProjectResponse)
async def get_project(
    project_id: UUID,
    get_project_use_case: FromDishka[GetProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetProjectResponse:
    """Get project detail.

    Members see the project and its members. The owner additionally sees
    pending invites and the share link.

    Raises:
        HTTPException: 404 if the project does not exist, 403 if the caller
            is not a member
    """
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await get_project_use_case.execute(
            GetProjectRequest(project_id=str(project_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("get project", e) from e


@router.delete("/{project_id}", response_model=DeleteProjectResponse)
async def delete_project(
    project_id: UUID,
    delete_project_use_case: FromDishka[DeleteProjectUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> DeleteProjectResponse:
    """Delete a project with its tasks and invites. Owner only."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await delete_project_use_case.execute(
            DeleteProjectRequest(project_id=str(project_id), user_id=user_id)
        )
    except CascadeDeleteError as e:
        raise internal_error("delete project", e) from e
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("delete project", e) from e


@router.get("/{project_id}/share-link", response_model=ShareLinkResponse)
async def get_share_link(
    project_id: UUID,
    get_share_link_use_case: FromDishka[GetShareLinkUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ShareLinkResponse:
    """Get the project's share link, issuing one if none is live. Owner only."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await get_share_link_use_case.execute(
            ShareLinkRequest(project_id=str(project_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("get share link", e) from e


@router.post("/{project_id}/share-link/reset", response_model=ShareLinkResponse)
async def reset_share_link(
    project_id: UUID,
    reset_share_link_use_case: FromDishka[ResetShareLinkUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ShareLinkResponse:
    """Replace the project's share link. The old link stops working at once."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await reset_share_link_use_case.execute(
            ShareLinkRequest(project_id=str(project_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("reset share link", e) from e
