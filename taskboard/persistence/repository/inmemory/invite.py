"""In-memory invite repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from taskboard.domain.model.invite import Invite
from taskboard.domain.repository.invite import InviteRepository
from taskboard.domain.value import AccessToken, InviteId, InviteStatus, ProjectId, UserId


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: list[Invite] = []

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID."""
        for invite in self._invites:
            if invite.id == invite_id:
                return invite
        return None

    async def find_by_token(self, token: AccessToken) -> Optional[Invite]:
        """Find an invite by its token."""
        for invite in self._invites:
            if invite.token == token:
                return invite
        return None

    async def find_by_project(
        self, project_id: ProjectId, status: Optional[InviteStatus] = None
    ) -> list[Invite]:
        """Find invites of a project, newest first."""
        matches = [
            i
            for i in self._invites
            if i.project_id == project_id and (status is None or i.status == status)
        ]
        return sorted(reversed(matches), key=lambda i: i.created_at, reverse=True)

    async def save(self, invite: Invite) -> Invite:
        """Insert an invite.

        Raises:
            IntegrityError: If the token is already in use
        """
        for existing in self._invites:
            if existing.id == invite.id or existing.token == invite.token:
                raise IntegrityError("Duplicate invite", None, Exception())
        self._invites.append(invite)
        return invite

    async def transition_status(
        self,
        invite_id: InviteId,
        from_status: InviteStatus,
        to_status: InviteStatus,
        accepted_by: Optional[UserId] = None,
        at: Optional[datetime] = None,
    ) -> Optional[Invite]:
        """Conditionally move an invite to ``to_status``."""
        for i, invite in enumerate(self._invites):
            if invite.id != invite_id:
                continue
            if invite.status != from_status:
                return None
            update: dict = {"status": to_status}
            if to_status == InviteStatus.ACCEPTED:
                update["accepted_by"] = accepted_by
                update["accepted_at"] = at
            updated = invite.model_copy(update=update)
            self._invites[i] = updated
            return updated
        return None

    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every invite of a project."""
        before = len(self._invites)
        self._invites = [i for i in self._invites if i.project_id != project_id]
        return before - len(self._invites)
