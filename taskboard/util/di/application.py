"""Application layer DI providers."""

from dishka import Scope, provide

from taskboard.application.usecase.guest import (
    CreateGuestTaskUseCase,
    DeleteGuestTaskUseCase,
    GetGuestProjectUseCase,
    ListGuestTasksUseCase,
    UpdateGuestTaskUseCase,
)
from taskboard.application.usecase.invite import (
    AcceptInviteUseCase,
    CreateInviteUseCase,
    RevokeInviteUseCase,
)
from taskboard.application.usecase.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectUseCase,
    GetShareLinkUseCase,
    ListProjectsUseCase,
    ResetShareLinkUseCase,
)
from taskboard.application.usecase.task import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    UpdateTaskUseCase,
)
from taskboard.config import Settings
from taskboard.domain.repository import UnitOfWork
from taskboard.domain.service import (
    InviteNotificationService,
    InviteService,
    ProjectService,
    TaskService,
)
from taskboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Project use cases
    @provide
    def get_create_project_use_case(
        self, project_service: ProjectService
    ) -> CreateProjectUseCase:
        """Provide create project use case."""
        return CreateProjectUseCase(project_service=project_service)

    @provide
    def get_list_projects_use_case(
        self, project_service: ProjectService
    ) -> ListProjectsUseCase:
        """Provide list projects use case."""
        return ListProjectsUseCase(project_service=project_service)

    @provide
    def get_get_project_use_case(
        self,
        project_service: ProjectService,
        invite_service: InviteService,
        settings: Settings,
    ) -> GetProjectUseCase:
        """Provide get project use case."""
        return GetProjectUseCase(
            project_service=project_service,
            invite_service=invite_service,
            settings=settings,
        )

    @provide
    def get_delete_project_use_case(
        self, project_service: ProjectService
    ) -> DeleteProjectUseCase:
        """Provide delete project use case."""
        return DeleteProjectUseCase(project_service=project_service)

    @provide
    def get_get_share_link_use_case(
        self, project_service: ProjectService, settings: Settings
    ) -> GetShareLinkUseCase:
        """Provide get share link use case."""
        return GetShareLinkUseCase(project_service=project_service, settings=settings)

    @provide
    def get_reset_share_link_use_case(
        self, project_service: ProjectService, settings: Settings
    ) -> ResetShareLinkUseCase:
        """Provide reset share link use case."""
        return ResetShareLinkUseCase(
            project_service=project_service, settings=settings
        )

    # Invite use cases
    @provide
    def get_create_invite_use_case(
        self,
        project_service: ProjectService,
        invite_service: InviteService,
        notification_service: InviteNotificationService,
        unit_of_work: UnitOfWork,
        settings: Settings,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            project_service=project_service,
            invite_service=invite_service,
            notification_service=notification_service,
            unit_of_work=unit_of_work,
            settings=settings,
        )

    @provide
    def get_accept_invite_use_case(
        self, invite_service: InviteService
    ) -> AcceptInviteUseCase:
        """Provide accept invite use case."""
        return AcceptInviteUseCase(invite_service=invite_service)

    @provide
    def get_revoke_invite_use_case(
        self, invite_service: InviteService, project_service: ProjectService
    ) -> RevokeInviteUseCase:
        """Provide revoke invite use case."""
        return RevokeInviteUseCase(
            invite_service=invite_service, project_service=project_service
        )

    # Guest use cases
    @provide
    def get_guest_project_use_case(
        self, invite_service: InviteService
    ) -> GetGuestProjectUseCase:
        """Provide guest project use case."""
        return GetGuestProjectUseCase(invite_service=invite_service)

    @provide
    def get_list_guest_tasks_use_case(
        self, invite_service: InviteService, task_service: TaskService
    ) -> ListGuestTasksUseCase:
        """Provide list guest tasks use case."""
        return ListGuestTasksUseCase(
            invite_service=invite_service, task_service=task_service
        )

    @provide
    def get_create_guest_task_use_case(
        self, invite_service: InviteService, task_service: TaskService
    ) -> CreateGuestTaskUseCase:
        """Provide create guest task use case."""
        return CreateGuestTaskUseCase(
            invite_service=invite_service, task_service=task_service
        )

    @provide
    def get_update_guest_task_use_case(
        self, invite_service: InviteService, task_service: TaskService
    ) -> UpdateGuestTaskUseCase:
        """Provide update guest task use case."""
        return UpdateGuestTaskUseCase(
            invite_service=invite_service, task_service=task_service
        )

    @provide
    def get_delete_guest_task_use_case(
        self, invite_service: InviteService, task_service: TaskService
    ) -> DeleteGuestTaskUseCase:
        """Provide delete guest task use case."""
        return DeleteGuestTaskUseCase(
            invite_service=invite_service, task_service=task_service
        )

    # Task use cases
    @provide
    def get_create_task_use_case(
        self, task_service: TaskService, project_service: ProjectService
    ) -> CreateTaskUseCase:
        """Provide create task use case."""
        return CreateTaskUseCase(
            task_service=task_service, project_service=project_service
        )

    @provide
    def get_list_tasks_use_case(
        self, task_service: TaskService, project_service: ProjectService
    ) -> ListTasksUseCase:
        """Provide list tasks use case."""
        return ListTasksUseCase(
            task_service=task_service, project_service=project_service
        )

    @provide
    def get_get_task_use_case(
        self, task_service: TaskService, project_service: ProjectService
    ) -> GetTaskUseCase:
        """Provide get task use case."""
        return GetTaskUseCase(task_service=task_service, project_service=project_service)

    @provide
    def get_update_task_use_case(
        self, task_service: TaskService, project_service: ProjectService
    ) -> UpdateTaskUseCase:
        """Provide update task use case."""
        return UpdateTaskUseCase(
            task_service=task_service, project_service=project_service
        )

    @provide
    def get_delete_task_use_case(
        self, task_service: TaskService, project_service: ProjectService
    ) -> DeleteTaskUseCase:
        """Provide delete task use case."""
        return DeleteTaskUseCase(
            task_service=task_service, project_service=project_service
        )
