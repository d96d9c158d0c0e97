"""Unit tests for CreateInviteUseCase."""

from uuid import uuid4

import pytest

from taskboard.adapter.email import MockInviteNotifier
from taskboard.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
)
from taskboard.config import Settings
from taskboard.domain.error import ForbiddenError, NotFoundError, ValidationError
from taskboard.domain.repository import InviteRepository
from taskboard.domain.service import (
    InviteNotificationService,
    InviteNotifier,
    InviteService,
    ProjectService,
)
from taskboard.domain.value import InviteStatus, UserId
from taskboard.persistence.repository.inmemory import InMemoryUnitOfWork
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class CommitCheckingNotifier(InviteNotifier):
    """Records how many commits had happened when each invite was sent."""

    def __init__(self, unit_of_work: InMemoryUnitOfWork) -> None:
        self.unit_of_work = unit_of_work
        self.commits_at_send: list[int] = []

    async def send_invite(
        self, email: str, accept_url: str, project_name: str
    ) -> str | None:
        self.commits_at_send.append(self.unit_of_work.commits)
        return None


class TestCreateInviteUseCase:
    """Tests for CreateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_owner_creates_invite_and_email_is_sent(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        notifier = await unit_env.get(MockInviteNotifier)
        settings = await unit_env.get(Settings)
        use_case = await unit_env.get(CreateInviteUseCase)
        owner = UserId(uuid4())
        project = await project_service.create_project("Launch", owner)

        # Act
        response = await use_case.execute(
            CreateInviteRequest(
                project_id=str(project.id),
                user_id=str(owner),
                email="friend@example.com",
            )
        )

        # Assert
        assert response.invite.status == InviteStatus.PENDING
        assert response.accept_url == settings.invite_accept_url(response.token)
        assert response.email_sent is True
        assert response.preview_url is not None
        assert notifier.sent[0].accept_url == response.accept_url

    @pytest.mark.asyncio
    async def test_email_failure_still_creates_invite(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        invite_repo = await unit_env.get(InviteRepository)
        use_case = CreateInviteUseCase(
            project_service=project_service,
            invite_service=await unit_env.get(InviteService),
            notification_service=InviteNotificationService(
                notifier=MockInviteNotifier(fail=True)
            ),
            unit_of_work=await unit_env.get(InMemoryUnitOfWork),
            settings=await unit_env.get(Settings),
        )
        owner = UserId(uuid4())
        project = await project_service.create_project("Launch", owner)

        # Act
        response = await use_case.execute(
            CreateInviteRequest(
                project_id=str(project.id),
                user_id=str(owner),
                email="friend@example.com",
            )
        )

        # Assert
        assert response.email_sent is False
        assert response.preview_url is None
        invites = await invite_repo.find_by_project(project.id)
        assert [i.token.root for i in invites] == [response.token]

    @pytest.mark.asyncio
    async def test_non_owner_cannot_invite(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        use_case = await unit_env.get(CreateInviteUseCase)
        project = await project_service.create_project("Launch", UserId(uuid4()))

        with pytest.raises(ForbiddenError, match="Only owner can invite"):
            await use_case.execute(
                CreateInviteRequest(
                    project_id=str(project.id),
                    user_id=str(uuid4()),
                    email="friend@example.com",
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_project(self, unit_env):
        use_case = await unit_env.get(CreateInviteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateInviteRequest(
                    project_id=str(uuid4()),
                    user_id=str(uuid4()),
                    email="friend@example.com",
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_email(self, unit_env):
        use_case = await unit_env.get(CreateInviteUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateInviteRequest(
                    project_id=str(uuid4()), user_id=str(uuid4()), email="nope"
                )
            )

    @pytest.mark.asyncio
    async def test_invite_is_committed_before_the_email_goes_out(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        unit_of_work = await unit_env.get(InMemoryUnitOfWork)
        notifier = CommitCheckingNotifier(unit_of_work)
        use_case = CreateInviteUseCase(
            project_service=project_service,
            invite_service=await unit_env.get(InviteService),
            notification_service=InviteNotificationService(notifier=notifier),
            unit_of_work=unit_of_work,
            settings=await unit_env.get(Settings),
        )
        owner = UserId(uuid4())
        project = await project_service.create_project("Launch", owner)

        # Act
        response = await use_case.execute(
            CreateInviteRequest(
                project_id=str(project.id),
                user_id=str(owner),
                email="friend@example.com",
            )
        )

        # Assert
        assert response.email_sent is True
        assert notifier.commits_at_send == [1]
