"""Caller identity from bearer tokens."""

import logfire

from taskboard.config import AuthSettings
from taskboard.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service


class JWTService(Service):
    """Resolves bearer tokens issued by the identity service."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Bearer token rejected", error=str(e))
            raise
        logfire.debug("Bearer token accepted", user_id=payload.user_id)
        return payload

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Caller's user id, or None when the token is absent or unusable.

        Used where anonymous callers are allowed to continue.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
