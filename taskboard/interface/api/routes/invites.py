"""Invite routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel

from taskboard.application.usecase.invite import (
    AcceptInviteRequest,
    AcceptInviteResponse,
    AcceptInviteUseCase,
    CreateInviteRequest,
    CreateInviteResponse,
    CreateInviteUseCase,
    RevokeInviteRequest,
    RevokeInviteResponse,
    RevokeInviteUseCase,
)
from taskboard.domain.error import DomainError
from taskboard.domain.service import JWTService
from taskboard.interface.api.auth import optional_user_id, require_user_id
from taskboard.interface.error import internal_error, to_http_exception

router = APIRouter(prefix="/collab", tags=["invites"], route_class=DishkaRoute)


class CreateInviteAPIRequest(BaseModel):
    """API request for inviting someone to a project."""

    project_id: UUID
    email: str


class AcceptInviteAPIRequest(BaseModel):
    """API request for accepting an invite or share link."""

    token: str | None = None


@router.post(
    "/invite", response_model=CreateInviteResponse, status_code=status.HTTP_201_CREATED
)
async def create_invite(
    request: CreateInviteAPIRequest,
    create_invite_use_case: FromDishka[CreateInviteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> CreateInviteResponse:
    """Invite someone to a project by email. Owner only.

    The invite is created even if the email cannot be sent; the returned
    accept URL can then be shared by hand.

    Args:
        request: Project and recipient email
        create_invite_use_case: Create invite use case from DI
        jwt_service: JWT service from DI
        authorization: Bearer token header

    Returns:
        Invite with its token, accept URL and delivery outcome

    Raises:
        HTTPException: 400 bad email, 404 project, 403 not owner
    """
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await create_invite_use_case.execute(
            CreateInviteRequest(
                project_id=str(request.project_id),
                user_id=user_id,
                email=request.email,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except ValueError as e:
        logfire.warn("Invite creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("create invite", e) from e


@router.delete("/invites/{invite_id}", response_model=RevokeInviteResponse)
async def revoke_invite(
    invite_id: UUID,
    revoke_invite_use_case: FromDishka[RevokeInviteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> RevokeInviteResponse:
    """Revoke a pending invite. Owner only."""
    user_id = require_user_id(authorization, jwt_service)

    try:
        return await revoke_invite_use_case.execute(
            RevokeInviteRequest(invite_id=str(invite_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("revoke invite", e) from e


async def _accept(
    token: str | None,
    accept_invite_use_case: AcceptInviteUseCase,
    jwt_service: JWTService,
    authorization: str | None,
) -> AcceptInviteResponse:
    # Identity is checked by the use case, after the token itself
    user_id = optional_user_id(authorization, jwt_service)

    try:
        return await accept_invite_use_case.execute(
            AcceptInviteRequest(token=token, user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception as e:
        raise internal_error("accept invite", e) from e


@router.post("/accept", response_model=AcceptInviteResponse)
async def accept_invite(
    request: AcceptInviteAPIRequest,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AcceptInviteResponse:
    """Join a project with an invite or share-link token.

    Raises:
        HTTPException: 400 missing/not-pending/expired, 401 anonymous,
            404 unknown token
    """
    return await _accept(
        request.token, accept_invite_use_case, jwt_service, authorization
    )


@router.get("/accept/{token}", response_model=AcceptInviteResponse)
async def accept_invite_link(
    token: str,
    accept_invite_use_case: FromDishka[AcceptInviteUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> AcceptInviteResponse:
    """Join a project by following an accept link."""
    return await _accept(token, accept_invite_use_case, jwt_service, authorization)
