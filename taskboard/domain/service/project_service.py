"""Project domain service."""

from uuid import uuid4

import logfire

from taskboard.config import InvitationSettings
from taskboard.domain.error import CascadeDeleteError, ForbiddenError, NotFoundError
from taskboard.domain.model.common import utcnow
from taskboard.domain.model.project import Project
from taskboard.domain.repository import (
    InviteRepository,
    ProjectRepository,
    TaskRepository,
)
from taskboard.domain.value import AccessToken, ProjectId, Role, UserId
from taskboard.util.observability import mask_token

from .access import is_owner, role_of
from .base import Service


class ProjectService(Service):
    """Domain service for project lifecycle and share links."""

    def __init__(
        self,
        project_repository: ProjectRepository,
        invite_repository: InviteRepository,
        task_repository: TaskRepository,
        invitation_settings: InvitationSettings,
    ) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
            invite_repository: Invite repository
            task_repository: Task repository
            invitation_settings: Token settings
        """
        self.project_repository = project_repository
        self.invite_repository = invite_repository
        self.task_repository = task_repository
        self.invitation_settings = invitation_settings

    def _new_token(self) -> AccessToken:
        return AccessToken.generate(self.invitation_settings.token_bytes)

    async def create_project(self, name: str, owner_id: UserId) -> Project:
        """Create a project owned by ``owner_id``.

        Args:
            name: Project name
            owner_id: Creator, who becomes the owner

        Returns:
            Created project
        """
        with logfire.span("project_service.create_project", owner_id=str(owner_id)):
            now = utcnow()
            token = None
            if self.invitation_settings.pregenerate_share_link:
                token = self._new_token()

            project = Project(
                id=ProjectId(uuid4()),
                name=name,
                owner_id=owner_id,
                members=[],
                invite_token=token,
                invite_token_created_at=now if token else None,
                created_at=now,
            )
            saved = await self.project_repository.save(project)
            logfire.info(
                "Project created",
                project_id=str(saved.id),
                owner_id=str(owner_id),
                has_share_link=token is not None,
            )
            return saved

    async def get_project(self, project_id: ProjectId) -> Project | None:
        """Get project by ID."""
        return await self.project_repository.find_by_id(project_id)

    async def require_project(self, project_id: ProjectId) -> Project:
        """Get project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.project_repository.find_by_id(project_id)
        if project is None:
            logfire.warn("Project not found", project_id=str(project_id))
            raise NotFoundError("Project", str(project_id))
        return project

    async def require_member(
        self, project_id: ProjectId, user_id: UserId
    ) -> tuple[Project, Role]:
        """Load a project and the caller's role in it.

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller has no role in the project
        """
        project = await self.require_project(project_id)
        role = role_of(project, user_id)
        if role is None:
            logfire.warn(
                "Not a project member",
                project_id=str(project_id),
                user_id=str(user_id),
            )
            raise ForbiddenError("Not a project member", "project", str(project_id))
        return project, role

    async def require_owner(
        self, project_id: ProjectId, user_id: UserId, message: str
    ) -> Project:
        """Load a project the caller owns.

        Args:
            project_id: Project ID
            user_id: Caller
            message: Reason reported when the caller is not the owner

        Raises:
            NotFoundError: If the project does not exist
            ForbiddenError: If the caller is not the owner
        """
        project = await self.require_project(project_id)
        if not is_owner(project, user_id):
            logfire.warn(
                "Owner-only action denied",
                project_id=str(project_id),
                user_id=str(user_id),
                reason=message,
            )
            raise ForbiddenError(message, "project", str(project_id))
        return project

    async def list_projects_for_user(self, user_id: UserId) -> list[Project]:
        """List projects the user owns or is a member of."""
        with logfire.span("project_service.list_projects", user_id=str(user_id)):
            projects = await self.project_repository.find_for_user(user_id)
            logfire.info("Projects listed", user_id=str(user_id), count=len(projects))
            return projects

    async def get_or_create_share_link(self, project: Project) -> Project:
        """Return the project with a live share-link token, issuing one if absent.

        Concurrent callers converge on a single token.

        Args:
            project: Project

        Returns:
            Project carrying its live share-link token

        Raises:
            NotFoundError: If the project vanished meanwhile
        """
        if project.invite_token is not None:
            return project

        with logfire.span(
            "project_service.get_or_create_share_link", project_id=str(project.id)
        ):
            updated = await self.project_repository.set_invite_token_if_absent(
                project.id, self._new_token(), utcnow()
            )
            if updated is None:
                raise NotFoundError("Project", str(project.id))
            logfire.info(
                "Share link issued",
                project_id=str(project.id),
                token=mask_token(updated.invite_token.root),
            )
            return updated

    async def reset_share_link(self, project: Project) -> Project:
        """Replace the share-link token; the previous one stops resolving.

        Args:
            project: Project

        Returns:
            Project carrying the new token

        Raises:
            NotFoundError: If the project vanished meanwhile
        """
        with logfire.span(
            "project_service.reset_share_link", project_id=str(project.id)
        ):
            updated = await self.project_repository.replace_invite_token(
                project.id, self._new_token(), utcnow()
            )
            if updated is None:
                raise NotFoundError("Project", str(project.id))
            logfire.info(
                "Share link reset",
                project_id=str(project.id),
                token=mask_token(updated.invite_token.root),
            )
            return updated

    async def delete_project(self, project_id: ProjectId) -> None:
        """Delete a project with its tasks and invites.

        Order is tasks, then invites, then the project itself. Each step
        is safe to repeat, so a failed deletion can simply be retried.

        Args:
            project_id: Project ID

        Raises:
            CascadeDeleteError: If a step fails part-way
        """
        with logfire.span("project_service.delete_project", project_id=str(project_id)):
            completed: list[str] = []
            try:
                tasks = await self.task_repository.delete_by_project(project_id)
                completed.append("tasks")
                invites = await self.invite_repository.delete_by_project(project_id)
                completed.append("invites")
                await self.project_repository.delete(project_id)
                completed.append("project")
            except Exception as e:
                logfire.error(
                    "Project cascade delete failed",
                    project_id=str(project_id),
                    completed_steps=completed,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise CascadeDeleteError(str(project_id), completed, e) from e

            logfire.info(
                "Project deleted",
                project_id=str(project_id),
                tasks_deleted=tasks,
                invites_deleted=invites,
            )
