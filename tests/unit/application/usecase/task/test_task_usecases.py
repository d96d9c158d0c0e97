"""Unit tests for member task use cases."""

from uuid import uuid4

import pytest

from taskboard.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskUseCase,
    DeleteTaskRequest,
    DeleteTaskUseCase,
    GetTaskRequest,
    GetTaskUseCase,
    ListTasksRequest,
    ListTasksUseCase,
    NewTaskFields,
    TaskChanges,
    UpdateTaskRequest,
    UpdateTaskUseCase,
)
from taskboard.domain.error import ForbiddenError, NotFoundError
from taskboard.domain.model import ProjectMember
from taskboard.domain.repository import ProjectRepository
from taskboard.domain.service import ProjectService
from taskboard.domain.value import Role, TaskPriority, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _project_with(unit_env, role: Role):
    """Project plus a member holding ``role``."""
    project_service = await unit_env.get(ProjectService)
    project_repo = await unit_env.get(ProjectRepository)
    owner, member = UserId(uuid4()), UserId(uuid4())
    project = await project_service.create_project("Launch", owner)
    await project_repo.add_member_if_absent(
        project.id, ProjectMember(user_id=member, role=role)
    )
    return project, owner, member


class TestCreateTaskUseCase:
    """Tests for CreateTaskUseCase."""

    @pytest.mark.asyncio
    async def test_personal_task_defaults_to_low_priority(self, unit_env):
        use_case = await unit_env.get(CreateTaskUseCase)
        user_id = str(uuid4())

        task = await use_case.execute(
            CreateTaskRequest(user_id=user_id, fields=NewTaskFields(title="Buy milk"))
        )

        assert task.priority == TaskPriority.LOW
        assert task.owner_id == user_id
        assert task.project_id is None

    @pytest.mark.asyncio
    async def test_editor_creates_project_task(self, unit_env):
        project, _, editor = await _project_with(unit_env, Role.EDITOR)
        use_case = await unit_env.get(CreateTaskUseCase)

        task = await use_case.execute(
            CreateTaskRequest(
                user_id=str(editor),
                project_id=str(project.id),
                fields=NewTaskFields(title="Ship it", priority=TaskPriority.HIGH),
            )
        )

        assert task.project_id == str(project.id)
        assert task.priority == TaskPriority.HIGH

    @pytest.mark.asyncio
    async def test_viewer_cannot_create_project_task(self, unit_env):
        project, _, viewer = await _project_with(unit_env, Role.VIEWER)
        use_case = await unit_env.get(CreateTaskUseCase)

        with pytest.raises(ForbiddenError, match="Viewers cannot modify tasks"):
            await use_case.execute(
                CreateTaskRequest(
                    user_id=str(viewer),
                    project_id=str(project.id),
                    fields=NewTaskFields(title="Ship it"),
                )
            )

    @pytest.mark.asyncio
    async def test_stranger_cannot_create_project_task(self, unit_env):
        project, _, _ = await _project_with(unit_env, Role.EDITOR)
        use_case = await unit_env.get(CreateTaskUseCase)

        with pytest.raises(ForbiddenError, match="Not a project member"):
            await use_case.execute(
                CreateTaskRequest(
                    user_id=str(uuid4()),
                    project_id=str(project.id),
                    fields=NewTaskFields(title="Ship it"),
                )
            )


class TestTaskAccessUseCases:
    """Tests for get, update and delete access rules."""

    @pytest.mark.asyncio
    async def test_viewer_can_read_but_not_update_or_delete(self, unit_env):
        # Arrange
        project, owner, viewer = await _project_with(unit_env, Role.VIEWER)
        create = await unit_env.get(CreateTaskUseCase)
        task = await create.execute(
            CreateTaskRequest(
                user_id=str(owner),
                project_id=str(project.id),
                fields=NewTaskFields(title="Ship it"),
            )
        )
        get = await unit_env.get(GetTaskUseCase)
        update = await unit_env.get(UpdateTaskUseCase)
        delete = await unit_env.get(DeleteTaskUseCase)

        # Act
        seen = await get.execute(
            GetTaskRequest(task_id=task.task_id, user_id=str(viewer))
        )

        # Assert
        assert seen.task_id == task.task_id
        with pytest.raises(ForbiddenError, match="Viewers cannot modify tasks"):
            await update.execute(
                UpdateTaskRequest(
                    task_id=task.task_id,
                    user_id=str(viewer),
                    changes=TaskChanges(title="Renamed"),
                )
            )
        with pytest.raises(ForbiddenError, match="Viewers cannot modify tasks"):
            await delete.execute(
                DeleteTaskRequest(task_id=task.task_id, user_id=str(viewer))
            )

    @pytest.mark.asyncio
    async def test_editor_completes_task_of_another_member(self, unit_env):
        # Arrange
        project, owner, editor = await _project_with(unit_env, Role.EDITOR)
        create = await unit_env.get(CreateTaskUseCase)
        task = await create.execute(
            CreateTaskRequest(
                user_id=str(owner),
                project_id=str(project.id),
                fields=NewTaskFields(title="Ship it"),
            )
        )
        update = await unit_env.get(UpdateTaskUseCase)

        # Act
        updated = await update.execute(
            UpdateTaskRequest(
                task_id=task.task_id,
                user_id=str(editor),
                changes=TaskChanges(completed=True),
            )
        )

        # Assert
        assert updated.completed is True
        assert updated.completed_at is not None
        assert updated.owner_id == str(owner)

    @pytest.mark.asyncio
    async def test_personal_task_is_private(self, unit_env):
        create = await unit_env.get(CreateTaskUseCase)
        get = await unit_env.get(GetTaskUseCase)
        task = await create.execute(
            CreateTaskRequest(
                user_id=str(uuid4()), fields=NewTaskFields(title="Buy milk")
            )
        )

        with pytest.raises(ForbiddenError, match="Not your task"):
            await get.execute(GetTaskRequest(task_id=task.task_id, user_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_unknown_task(self, unit_env):
        get = await unit_env.get(GetTaskUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetTaskRequest(task_id=str(uuid4()), user_id=str(uuid4())))


class TestListTasksUseCase:
    """Tests for ListTasksUseCase."""

    @pytest.mark.asyncio
    async def test_lists_personal_and_project_tasks(self, unit_env):
        # Arrange
        project, owner, editor = await _project_with(unit_env, Role.EDITOR)
        create = await unit_env.get(CreateTaskUseCase)
        project_task = await create.execute(
            CreateTaskRequest(
                user_id=str(owner),
                project_id=str(project.id),
                fields=NewTaskFields(title="Ship it"),
            )
        )
        personal = await create.execute(
            CreateTaskRequest(user_id=str(editor), fields=NewTaskFields(title="Mine"))
        )
        await create.execute(
            CreateTaskRequest(user_id=str(owner), fields=NewTaskFields(title="Theirs"))
        )
        list_tasks = await unit_env.get(ListTasksUseCase)

        # Act
        response = await list_tasks.execute(ListTasksRequest(user_id=str(editor)))

        # Assert
        assert {t.task_id for t in response.tasks} == {
            project_task.task_id,
            personal.task_id,
        }

    @pytest.mark.asyncio
    async def test_project_filter_requires_membership(self, unit_env):
        project, _, _ = await _project_with(unit_env, Role.EDITOR)
        list_tasks = await unit_env.get(ListTasksUseCase)

        with pytest.raises(ForbiddenError):
            await list_tasks.execute(
                ListTasksRequest(user_id=str(uuid4()), project_id=str(project.id))
            )
