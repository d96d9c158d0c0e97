"""PostgreSQL implementation of Invite repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.model import Invite
from taskboard.domain.repository import InviteRepository
from taskboard.domain.value import AccessToken, InviteId, InviteStatus, ProjectId, UserId
from taskboard.persistence.mappers import invite_to_dict, row_to_invite
from taskboard.persistence.tables import invites_table


class PostgresInviteRepository(InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invite_id: InviteId) -> Optional[Invite]:
        """Find an invite by ID.

        Args:
            invite_id: Invite ID to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.id == invite_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_token(self, token: AccessToken) -> Optional[Invite]:
        """Find an invite by its token.

        Args:
            token: Invite token to look up

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invite(dict(row)) if row else None

    async def find_by_project(
        self, project_id: ProjectId, status: Optional[InviteStatus] = None
    ) -> list[Invite]:
        """Find invites of a project, newest first."""
        stmt = select(invites_table).where(invites_table.c.project_id == project_id)
        if status:
            stmt = stmt.where(invites_table.c.status == status.value)
        stmt = stmt.order_by(invites_table.c.created_at.desc())

        result = await self.session.execute(stmt)
        return [row_to_invite(dict(row)) for row in result.mappings()]

    async def save(self, invite: Invite) -> Invite:
        """Insert an invite.

        Args:
            invite: Invite to save

        Returns:
            Saved invite
        """
        stmt = insert(invites_table).values(**invite_to_dict(invite))
        await self.session.execute(stmt)
        await self.session.flush()
        return invite

    async def transition_status(
        self,
        invite_id: InviteId,
        from_status: InviteStatus,
        to_status: InviteStatus,
        accepted_by: Optional[UserId] = None,
        at: Optional[datetime] = None,
    ) -> Optional[Invite]:
        """Conditionally move an invite to ``to_status``.

        The status predicate in the WHERE clause makes this a single atomic
        compare-and-set.
        """
        values: dict = {"status": to_status.value}
        if to_status == InviteStatus.ACCEPTED:
            values["accepted_by"] = accepted_by
            values["accepted_at"] = at

        stmt = (
            update(invites_table)
            .where(
                invites_table.c.id == invite_id,
                invites_table.c.status == from_status.value,
            )
            .values(**values)
            .returning(*invites_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_invite(dict(row)) if row else None

    async def delete_by_project(self, project_id: ProjectId) -> int:
        """Delete every invite of a project."""
        stmt = delete(invites_table).where(invites_table.c.project_id == project_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
