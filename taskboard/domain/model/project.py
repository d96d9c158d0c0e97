"""Project aggregate root.

A project groups tasks and the people allowed to work on them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from taskboard.domain.model.common import DomainModel, utcnow
from taskboard.domain.value import AccessToken, ProjectId, Role, UserId


class ProjectMember(DomainModel):
    """A user's membership in a project."""

    user_id: UserId
    role: Role


class Project(DomainModel):
    """Project aggregate root.

    Business rules:
    - Exactly one owner, fixed at creation (no ownership transfer)
    - The owner is implied by ``owner_id`` and is not stored in ``members``
    - At most one membership entry per user
    - At most one live share-link token; replacing it invalidates the old one
    """

    id: ProjectId
    name: str = Field(min_length=1, max_length=200)
    owner_id: UserId
    members: list[ProjectMember] = Field(default_factory=list)
    invite_token: Optional[AccessToken] = None  # Standing share link
    invite_token_created_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)

    @model_validator(mode="after")
    def validate_members(self) -> "Project":
        """Reject duplicate members and second owners."""
        seen: set[UserId] = set()
        for member in self.members:
            if member.user_id in seen:
                raise ValueError(f"Duplicate member {member.user_id}")
            seen.add(member.user_id)
            if member.role == Role.OWNER and member.user_id != self.owner_id:
                raise ValueError("Only the project owner can hold the owner role")
        return self

    def member_ids(self) -> set[UserId]:
        """Ids of every user with access, owner included."""
        return {self.owner_id} | {m.user_id for m in self.members}
