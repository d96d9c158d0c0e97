"""Unit tests for guest use cases."""

from uuid import uuid4

import pytest

from taskboard.application.usecase.guest import (
    CreateGuestTaskUseCase,
    DeleteGuestTaskUseCase,
    GetGuestProjectUseCase,
    GuestCreateTaskRequest,
    GuestDeleteTaskRequest,
    GuestProjectRequest,
    GuestTaskListRequest,
    GuestUpdateTaskRequest,
    ListGuestTasksUseCase,
    UpdateGuestTaskUseCase,
)
from taskboard.application.usecase.task import NewTaskFields, TaskChanges
from taskboard.domain.error import (
    ForbiddenError,
    InviteNotPendingError,
    NotFoundError,
)
from taskboard.domain.service import (
    InviteService,
    ProjectService,
    TaskService,
)
from taskboard.domain.value import Email, TaskPriority, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGuestProject:
    """Tests for GetGuestProjectUseCase."""

    @pytest.mark.asyncio
    async def test_share_link_opens_project(self, unit_env):
        project_service = await unit_env.get(ProjectService)
        use_case = await unit_env.get(GetGuestProjectUseCase)
        project = await project_service.create_project("Launch", UserId(uuid4()))

        response = await use_case.execute(
            GuestProjectRequest(token=project.invite_token.root)
        )

        assert response.project.project_id == str(project.id)

    @pytest.mark.asyncio
    async def test_revoked_invite_does_not_open_project(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        invite_service = await unit_env.get(InviteService)
        use_case = await unit_env.get(GetGuestProjectUseCase)
        owner = UserId(uuid4())
        project = await project_service.create_project("Launch", owner)
        invite = await invite_service.create_invite(
            project, Email("friend@example.com"), owner
        )
        await invite_service.revoke(invite)

        # Act & Assert
        with pytest.raises(InviteNotPendingError):
            await use_case.execute(GuestProjectRequest(token=invite.token.root))


class TestGuestTasks:
    """Tests for guest task use cases."""

    @pytest.mark.asyncio
    async def test_guest_task_is_owned_by_project_owner(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        create = await unit_env.get(CreateGuestTaskUseCase)
        list_tasks = await unit_env.get(ListGuestTasksUseCase)
        owner = UserId(uuid4())
        project = await project_service.create_project("Launch", owner)
        token = project.invite_token.root

        # Act
        task = await create.execute(
            GuestCreateTaskRequest(token=token, fields=NewTaskFields(title="Ship it"))
        )
        listed = await list_tasks.execute(GuestTaskListRequest(token=token))

        # Assert
        assert task.owner_id == str(owner)
        assert task.project_id == str(project.id)
        assert task.priority == TaskPriority.MEDIUM
        assert [t.task_id for t in listed.tasks] == [task.task_id]

    @pytest.mark.asyncio
    async def test_guest_cannot_touch_task_of_another_project(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        task_service = await unit_env.get(TaskService)
        update = await unit_env.get(UpdateGuestTaskUseCase)
        delete = await unit_env.get(DeleteGuestTaskUseCase)
        mine = await project_service.create_project("Mine", UserId(uuid4()))
        other_owner = UserId(uuid4())
        other = await project_service.create_project("Other", other_owner)
        foreign = await task_service.create_task(
            other_owner, "Secret", project_id=other.id
        )
        token = mine.invite_token.root

        # Act & Assert
        with pytest.raises(ForbiddenError, match="Task not in this project"):
            await update.execute(
                GuestUpdateTaskRequest(
                    token=token,
                    task_id=str(foreign.id),
                    changes=TaskChanges(title="Hacked"),
                )
            )
        with pytest.raises(ForbiddenError):
            await delete.execute(
                GuestDeleteTaskRequest(token=token, task_id=str(foreign.id))
            )

    @pytest.mark.asyncio
    async def test_guest_updates_and_deletes_project_task(self, unit_env):
        # Arrange
        project_service = await unit_env.get(ProjectService)
        create = await unit_env.get(CreateGuestTaskUseCase)
        update = await unit_env.get(UpdateGuestTaskUseCase)
        delete = await unit_env.get(DeleteGuestTaskUseCase)
        project = await project_service.create_project("Launch", UserId(uuid4()))
        token = project.invite_token.root
        task = await create.execute(
            GuestCreateTaskRequest(token=token, fields=NewTaskFields(title="Ship it"))
        )

        # Act
        updated = await update.execute(
            GuestUpdateTaskRequest(
                token=token, task_id=task.task_id, changes=TaskChanges(completed=True)
            )
        )
        deleted = await delete.execute(
            GuestDeleteTaskRequest(token=token, task_id=task.task_id)
        )

        # Assert
        assert updated.completed is True
        assert deleted.deleted is True
        with pytest.raises(NotFoundError):
            await delete.execute(
                GuestDeleteTaskRequest(token=token, task_id=task.task_id)
            )
