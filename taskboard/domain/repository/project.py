"""Project repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime

from taskboard.domain.model.project import Project, ProjectMember
from taskboard.domain.value import AccessToken, ProjectId, UserId


class ProjectRepository(ABC):
    """Repository for Project aggregate.

    Membership and share-link changes are exposed as targeted, atomic
    operations so concurrent requests never race on a read-modify-write
    of the whole aggregate.
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Project | None:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project with its members if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_invite_token(self, token: AccessToken) -> Project | None:
        """Find the project whose live share-link token equals ``token``.

        Args:
            token: Share-link token

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_for_user(self, user_id: UserId) -> list[Project]:
        """Find projects the user owns or is a member of.

        Args:
            user_id: The user's ID

        Returns:
            Projects ordered newest first
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Insert a new project together with its members.

        Args:
            project: The project to save

        Returns:
            The saved project
        """
        pass

    @abstractmethod
    async def add_member_if_absent(
        self, project_id: ProjectId, member: ProjectMember
    ) -> bool:
        """Atomically add a member unless the user already has an entry.

        Args:
            project_id: Project ID
            member: Membership to add

        Returns:
            True if the member was inserted, False if already present
        """
        pass

    @abstractmethod
    async def set_invite_token_if_absent(
        self, project_id: ProjectId, token: AccessToken, created_at: datetime
    ) -> Project | None:
        """Set the share-link token only when none is live.

        Args:
            project_id: Project ID
            token: Candidate token
            created_at: Issue timestamp

        Returns:
            The project after the operation (with whichever token won),
            None if the project does not exist
        """
        pass

    @abstractmethod
    async def replace_invite_token(
        self, project_id: ProjectId, token: AccessToken, created_at: datetime
    ) -> Project | None:
        """Unconditionally replace the share-link token.

        Args:
            project_id: Project ID
            token: New token
            created_at: Issue timestamp

        Returns:
            The updated project, None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project and its membership rows.

        Args:
            project_id: Project ID

        Returns:
            True if a project was deleted
        """
        pass
