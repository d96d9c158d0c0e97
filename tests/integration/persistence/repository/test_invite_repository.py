"""Integration tests for PostgresInviteRepository."""

from datetime import timedelta
from uuid import uuid4

import pytest

from taskboard.domain.model import Invite, Project
from taskboard.domain.model.common import utcnow
from taskboard.domain.repository import InviteRepository, ProjectRepository
from taskboard.domain.value import (
    AccessToken,
    Email,
    InviteId,
    InviteStatus,
    ProjectId,
    UserId,
)
from tests.harness import create_env_fixture

integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def _saved_invite(integration_env) -> Invite:
    projects = await integration_env.get(ProjectRepository)
    invites = await integration_env.get(InviteRepository)
    owner = UserId(uuid4())
    project = await projects.save(
        Project(id=ProjectId(uuid4()), name="Launch", owner_id=owner)
    )
    return await invites.save(
        Invite(
            id=InviteId(uuid4()),
            email=Email("friend@example.com"),
            project_id=project.id,
            token=AccessToken.generate(),
            invited_by=owner,
            expires_at=utcnow() + timedelta(days=7),
        )
    )


class TestPostgresInviteRepository:
    """Integration tests for invite persistence."""

    async def test_find_by_token(self, integration_env):
        repo = await integration_env.get(InviteRepository)
        invite = await _saved_invite(integration_env)

        found = await repo.find_by_token(invite.token)

        assert found is not None
        assert found.id == invite.id
        assert found.email.root == "friend@example.com"
        assert found.status == InviteStatus.PENDING

    async def test_transition_status_happens_once(self, integration_env):
        # Arrange
        repo = await integration_env.get(InviteRepository)
        invite = await _saved_invite(integration_env)
        user = UserId(uuid4())

        # Act
        first = await repo.transition_status(
            invite.id, InviteStatus.PENDING, InviteStatus.ACCEPTED, user, utcnow()
        )
        second = await repo.transition_status(
            invite.id, InviteStatus.PENDING, InviteStatus.ACCEPTED, user, utcnow()
        )

        # Assert
        assert first is not None
        assert first.status == InviteStatus.ACCEPTED
        assert first.accepted_by == user
        assert second is None

    async def test_delete_by_project(self, integration_env):
        repo = await integration_env.get(InviteRepository)
        invite = await _saved_invite(integration_env)

        assert await repo.delete_by_project(invite.project_id) == 1
        assert await repo.find_by_id(invite.id) is None
