"""Invite repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from taskboard.domain.model.invite import Invite
from taskboard.domain.value import AccessToken, InviteId, InviteStatus, ProjectId, UserId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, invite_id: InviteId) -> Invite | None:
        """Find an invite by ID.

        Args:
            invite_id: The invite's unique identifier

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: AccessToken) -> Invite | None:
        """Find an invite by token.

        Used when a user opens an invite link.

        Args:
            token: The invite token

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_project(
        self, project_id: ProjectId, status: InviteStatus | None = None
    ) -> list[Invite]:
        """Find invites of a project.

        Args:
            project_id: Project ID
            status: Optional status filter

        Returns:
            Invites ordered newest first
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Insert a new invite.

        Args:
            invite: The invite to save

        Returns:
            The saved invite

        Raises:
            IntegrityError: If the token is already in use
        """
        pass

    @abstractmethod
    async def transition_status(
        self,
        invite_id: InviteId,
        from_status: InviteStatus,
        to_status: InviteStatus,
        accepted_by: UserId | None = None,
        at: datetime | None = None,
    ) -> Invite | None:
        """Move an invite between statuses only if it is still in ``from_status``.

        This is the single-use guarantee: of two concurrent acceptances only
        one sees the transition succeed.

        Args:
            invite_id: Invite ID
            from_status: Required current status
            to_status: New status
            accepted_by: User recorded on acceptance
            at: Acceptance timestamp

        Returns:
            The updated invite, or None if it was not in ``from_status``
        """
        pass

    @abstractmethod
    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every invite of a project. Safe to repeat.

        Args:
            project_id: Project ID

        Returns:
            Number of deleted invites
        """
        pass
