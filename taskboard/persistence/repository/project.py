"""PostgreSQL implementation of Project repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, Optional, Sequence

from sqlalchemy import delete, insert, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.model import Project, ProjectMember
from taskboard.domain.repository import ProjectRepository
from taskboard.domain.value import AccessToken, ProjectId, UserId
from taskboard.persistence.mappers import (
    member_to_dict,
    project_to_dict,
    row_to_project,
)
from taskboard.persistence.tables import project_members_table, projects_table


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load(self, rows: Sequence[Any]) -> list[Project]:
        """Attach member rows to project rows."""
        if not rows:
            return []

        stmt = select(project_members_table).where(
            project_members_table.c.project_id.in_([row["id"] for row in rows])
        )
        result = await self.session.execute(stmt)
        members: dict[Any, list[dict]] = defaultdict(list)
        for member_row in result.mappings():
            members[member_row["project_id"]].append(dict(member_row))

        return [row_to_project(dict(row), members[row["id"]]) for row in rows]

    async def _find_one(self, *criteria: Any) -> Optional[Project]:
        stmt = select(projects_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        projects = await self._load([row])
        return projects[0]

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return await self._find_one(projects_table.c.id == project_id)

    async def find_by_invite_token(self, token: AccessToken) -> Optional[Project]:
        """Find the project whose live share link is ``token``."""
        return await self._find_one(projects_table.c.invite_token == token.root)

    async def find_for_user(self, user_id: UserId) -> list[Project]:
        """Find projects the user owns or belongs to, newest first."""
        member_of = select(project_members_table.c.project_id).where(
            project_members_table.c.user_id == user_id
        )
        stmt = (
            select(projects_table)
            .where(
                or_(
                    projects_table.c.owner_id == user_id,
                    projects_table.c.id.in_(member_of),
                )
            )
            .order_by(projects_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return await self._load(result.mappings().all())

    async def save(self, project: Project) -> Project:
        """Insert a project and its members.

        Args:
            project: Project to save

        Returns:
            Saved project
        """
        await self.session.execute(
            insert(projects_table).values(**project_to_dict(project))
        )
        if project.members:
            await self.session.execute(
                insert(project_members_table),
                [member_to_dict(project.id, m) for m in project.members],
            )
        await self.session.flush()
        return project

    async def add_member_if_absent(
        self, project_id: ProjectId, member: ProjectMember
    ) -> bool:
        """Insert a membership row unless one exists for the user.

        Relies on the (project_id, user_id) primary key, so concurrent
        acceptances by the same user never produce two rows.
        """
        stmt = (
            pg_insert(project_members_table)
            .values(**member_to_dict(project_id, member))
            .on_conflict_do_nothing(index_elements=["project_id", "user_id"])
            .returning(project_members_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        inserted = result.first() is not None
        await self.session.flush()
        return inserted

    async def set_invite_token_if_absent(
        self, project_id: ProjectId, token: AccessToken, created_at: datetime
    ) -> Optional[Project]:
        """Set the share-link token only while none is live."""
        stmt = (
            update(projects_table)
            .where(
                projects_table.c.id == project_id,
                projects_table.c.invite_token.is_(None),
            )
            .values(invite_token=token.root, invite_token_created_at=created_at)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(project_id)

    async def replace_invite_token(
        self, project_id: ProjectId, token: AccessToken, created_at: datetime
    ) -> Optional[Project]:
        """Replace the share-link token."""
        stmt = (
            update(projects_table)
            .where(projects_table.c.id == project_id)
            .values(invite_token=token.root, invite_token_created_at=created_at)
            .returning(projects_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            return None
        await self.session.flush()
        return await self.find_by_id(project_id)

    async def delete(self, project_id: ProjectId) -> bool:
        """Delete a project and its membership rows."""
        await self.session.execute(
            delete(project_members_table).where(
                project_members_table.c.project_id == project_id
            )
        )
        result = await self.session.execute(
            delete(projects_table).where(projects_table.c.id == project_id)
        )
        await self.session.flush()
        return result.rowcount > 0
