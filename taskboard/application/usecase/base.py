"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from taskboard.domain.error import ValidationError
from taskboard.domain.value import UserId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_user_id(value: str) -> UserId:
    """Parse a caller id resolved from a bearer token.

    Raises:
        ValidationError: If the id is not a UUID
    """
    try:
        return UserId(UUID(value))
    except ValueError:
        raise ValidationError(f"Invalid user id: {value}")
