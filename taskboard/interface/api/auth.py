"""Bearer token resolution for routes."""

from uuid import UUID

from fastapi import HTTPException, status

from taskboard.domain.service import JWTService
from taskboard.util.jwt import JWTError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _valid_user_id(user_id: str) -> bool:
    try:
        UUID(user_id)
    except ValueError:
        return False
    return True


def require_user_id(authorization: str | None, jwt_service: JWTService) -> str:
    """Resolve the caller or reject the request.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    token = bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        payload = jwt_service.verify_token(token)
    except JWTError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    if not _valid_user_id(payload.user_id):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    return payload.user_id


def optional_user_id(authorization: str | None, jwt_service: JWTService) -> str | None:
    """Resolve the caller if a valid token was sent, None otherwise."""
    user_id = jwt_service.get_user_id_from_token(bearer_token(authorization))
    if user_id is None or not _valid_user_id(user_id):
        return None
    return user_id
