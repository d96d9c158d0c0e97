"""In-memory project repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from taskboard.domain.model.project import Project, ProjectMember
from taskboard.domain.repository.project import ProjectRepository
from taskboard.domain.value import AccessToken, ProjectId, UserId


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing.

    Conditional writes check and write without awaiting in between, so
    they are atomic on a single event loop.
    """

    def __init__(self) -> None:
        self._projects: dict[ProjectId, Project] = {}

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self._projects.get(project_id)

    async def find_by_invite_token(self, token: AccessToken) -> Optional[Project]:
        """Find a project by its live share-link token."""
        for project in self._projects.values():
            if project.invite_token == token:
                return project
        return None

    async def find_for_user(self, user_id: UserId) -> list[Project]:
        """Find projects the user owns or belongs to, newest first."""
        matches = [p for p in self._projects.values() if user_id in p.member_ids()]
        return sorted(reversed(matches), key=lambda p: p.created_at, reverse=True)

    async def save(self, project: Project) -> Project:
        """Insert a project.

        Raises:
            IntegrityError: If the share-link token is already in use
        """
        if project.invite_token is not None and await self.find_by_invite_token(
            project.invite_token
        ):
            raise IntegrityError("Duplicate share-link token", None, Exception())
        self._projects[project.id] = project
        return project

    async def add_member_if_absent(
        self, project_id: ProjectId, member: ProjectMember
    ) -> bool:
        """Add a member unless the user already has an entry."""
        project = self._projects.get(project_id)
        if project is None:
            return False
        if any(m.user_id == member.user_id for m in project.members):
            return False
        self._projects[project_id] = project.model_copy(
            update={"members": [*project.members, member]}
        )
        return True

    async def set_invite_token_if_absent(
        self, project_id: ProjectId, token: AccessToken, created_at: datetime
    ) -> Optional[Project]:
        """Set the share-link token only while none is live."""
        project = self._projects.get(project_id)
        if project is None:
            return None
        if project.invite_token is None:
            project = project.model_copy(
                update={"invite_token": token, "invite_token_created_at": created_at}
            )
            self._projects[project_id] = project
        return project

    async def replace_invite_token(
        self, project_id: ProjectId, token: AccessToken, created_at: datetime
    ) -> Optional[Project]:
        """Replace the share-link token."""
        project = self._projects.get(project_id)
        if project is None:
            return None
        project = project.model_copy(
            update={"invite_token": token, "invite_token_created_at": created_at}
        )
        self._projects[project_id] = project
        return project

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project."""
        return self._projects.pop(project_id, None) is not None
