"""Domain layer DI providers."""

from dishka import Scope, provide

from taskboard.config import AuthSettings, InvitationSettings
from taskboard.domain.repository import (
    InviteRepository,
    ProjectRepository,
    TaskRepository,
    UnitOfWork,
)
from taskboard.domain.service import (
    InviteNotificationService,
    InviteNotifier,
    InviteService,
    JWTService,
    ProjectService,
    TaskEventPublisher,
    TaskService,
)
from taskboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_project_service(
        self,
        project_repository: ProjectRepository,
        invite_repository: InviteRepository,
        task_repository: TaskRepository,
        invitation_settings: InvitationSettings,
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(
            project_repository=project_repository,
            invite_repository=invite_repository,
            task_repository=task_repository,
            invitation_settings=invitation_settings,
        )

    @provide
    def get_invite_service(
        self,
        invite_repository: InviteRepository,
        project_repository: ProjectRepository,
        invitation_settings: InvitationSettings,
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository,
            project_repository=project_repository,
            invitation_settings=invitation_settings,
        )

    @provide
    def get_task_service(
        self,
        task_repository: TaskRepository,
        event_publisher: TaskEventPublisher,
        unit_of_work: UnitOfWork,
    ) -> TaskService:
        """Provide task domain service."""
        return TaskService(
            task_repository=task_repository,
            event_publisher=event_publisher,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_notification_service(
        self, notifier: InviteNotifier
    ) -> InviteNotificationService:
        """Provide best-effort invite notification service."""
        return InviteNotificationService(notifier=notifier)
