"""Unit of work interface."""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

AfterCommit = Callable[[], Awaitable[None]]


class UnitOfWork(ABC):
    """Commit boundary of one request.

    Writes made through the repositories become durable on :meth:`commit`.
    Side effects that must not outrun the data (emails, realtime events)
    either run after an explicit commit or are queued with
    :meth:`after_commit`. Queued actions are dropped if the request fails.
    """

    def __init__(self) -> None:
        self._after_commit: list[AfterCommit] = []

    def after_commit(self, action: AfterCommit) -> None:
        """Queue an action to run once the current writes are committed.

        Actions must handle their own failures.
        """
        self._after_commit.append(action)

    async def commit(self) -> None:
        """Commit pending writes, then run the queued actions in order."""
        await self._commit()
        actions, self._after_commit = self._after_commit, []
        for action in actions:
            await action()

    def discard(self) -> None:
        """Drop queued actions, for a request that is being rolled back."""
        self._after_commit.clear()

    @abstractmethod
    async def _commit(self) -> None:
        """Make pending writes durable."""
        pass
