"""SQLAlchemy unit of work."""

from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.repository.unit_of_work import UnitOfWork


class SessionUnitOfWork(UnitOfWork):
    """Commits the request's session.

    Statements after a commit open a new transaction on the same session,
    which the request scope commits when it ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session

    async def _commit(self) -> None:
        await self.session.commit()
