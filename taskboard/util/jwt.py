"""Bearer token verification.

Accounts live in a separate identity service that signs HS256 tokens
carrying a ``user_id`` claim. This service only checks them; minting is
kept for local tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from taskboard.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims this service relies on."""

    user_id: str
    exp: datetime


class JWTError(Exception):
    """Token could not be trusted."""

    pass


def create_token(user_id: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` valid for the configured number of days."""
    claims = {
        "user_id": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then return the claims.

    Raises:
        JWTError: "Token has expired" or "Invalid token"
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValueError as e:
        raise JWTError("Invalid token") from e
