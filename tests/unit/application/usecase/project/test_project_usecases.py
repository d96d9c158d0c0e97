"""Unit tests for project use cases."""

from uuid import UUID, uuid4

import pytest

from taskboard.application.usecase.project import (
    CreateProjectRequest,
    CreateProjectUseCase,
    DeleteProjectRequest,
    DeleteProjectUseCase,
    GetProjectRequest,
    GetProjectUseCase,
    GetShareLinkUseCase,
    ListProjectsRequest,
    ListProjectsUseCase,
    ResetShareLinkUseCase,
    ShareLinkRequest,
)
from taskboard.domain.error import ForbiddenError
from taskboard.domain.model import ProjectMember
from taskboard.domain.repository import ProjectRepository
from taskboard.domain.service import InviteService
from taskboard.domain.value import Email, ProjectId, Role, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create(unit_env, owner: str) -> str:
    use_case = await unit_env.get(CreateProjectUseCase)
    response = await use_case.execute(CreateProjectRequest(user_id=owner, name="Launch"))
    return response.project.project_id


class TestCreateAndListProjects:
    """Tests for CreateProjectUseCase and ListProjectsUseCase."""

    @pytest.mark.asyncio
    async def test_creator_is_listed_as_owner(self, unit_env):
        # Arrange
        owner = str(uuid4())
        create = await unit_env.get(CreateProjectUseCase)
        list_projects = await unit_env.get(ListProjectsUseCase)

        # Act
        created = await create.execute(CreateProjectRequest(user_id=owner, name="Launch"))
        listed = await list_projects.execute(ListProjectsRequest(user_id=owner))

        # Assert
        assert created.role == Role.OWNER
        assert created.project.members[0].user_id == owner
        assert [(p.project.project_id, p.role) for p in listed.projects] == [
            (created.project.project_id, Role.OWNER)
        ]


class TestGetProjectUseCase:
    """Tests for GetProjectUseCase."""

    @pytest.mark.asyncio
    async def test_owner_sees_invites_and_share_link(self, unit_env):
        # Arrange
        owner = str(uuid4())
        project_id = await _create(unit_env, owner)
        invite_service = await unit_env.get(InviteService)
        project_repo = await unit_env.get(ProjectRepository)
        project = await project_repo.find_by_id(ProjectId(UUID(project_id)))
        await invite_service.create_invite(
            project, Email("friend@example.com"), project.owner_id
        )
        use_case = await unit_env.get(GetProjectUseCase)

        # Act
        response = await use_case.execute(
            GetProjectRequest(project_id=project_id, user_id=owner)
        )

        # Assert
        assert response.role == Role.OWNER
        assert len(response.pending_invites) == 1
        assert response.share_link.token == project.invite_token.root
        assert response.share_link.url.endswith(project.invite_token.root)

    @pytest.mark.asyncio
    async def test_member_does_not_see_owner_details(self, unit_env):
        # Arrange
        project_id = await _create(unit_env, str(uuid4()))
        project_repo = await unit_env.get(ProjectRepository)
        editor = UserId(uuid4())
        await project_repo.add_member_if_absent(
            ProjectId(UUID(project_id)),
            ProjectMember(user_id=editor, role=Role.EDITOR),
        )
        use_case = await unit_env.get(GetProjectUseCase)

        # Act
        response = await use_case.execute(
            GetProjectRequest(project_id=project_id, user_id=str(editor))
        )

        # Assert
        assert response.role == Role.EDITOR
        assert response.pending_invites is None
        assert response.share_link is None


class TestShareLinkUseCases:
    """Tests for the share-link use cases."""

    @pytest.mark.asyncio
    async def test_reset_returns_new_token(self, unit_env):
        # Arrange
        owner = str(uuid4())
        project_id = await _create(unit_env, owner)
        get_link = await unit_env.get(GetShareLinkUseCase)
        reset_link = await unit_env.get(ResetShareLinkUseCase)
        request = ShareLinkRequest(project_id=project_id, user_id=owner)

        # Act
        before = await get_link.execute(request)
        after = await reset_link.execute(request)

        # Assert
        assert before.share_link.token != after.share_link.token

    @pytest.mark.asyncio
    async def test_non_owner_cannot_read_share_link(self, unit_env):
        project_id = await _create(unit_env, str(uuid4()))
        get_link = await unit_env.get(GetShareLinkUseCase)

        with pytest.raises(ForbiddenError, match="Only owner can manage the share link"):
            await get_link.execute(
                ShareLinkRequest(project_id=project_id, user_id=str(uuid4()))
            )


class TestDeleteProjectUseCase:
    """Tests for DeleteProjectUseCase."""

    @pytest.mark.asyncio
    async def test_only_owner_can_delete(self, unit_env):
        # Arrange
        owner = str(uuid4())
        project_id = await _create(unit_env, owner)
        use_case = await unit_env.get(DeleteProjectUseCase)

        # Act & Assert
        with pytest.raises(ForbiddenError, match="Only owner can delete project"):
            await use_case.execute(
                DeleteProjectRequest(project_id=project_id, user_id=str(uuid4()))
            )
        response = await use_case.execute(
            DeleteProjectRequest(project_id=project_id, user_id=owner)
        )
        assert response.deleted is True
