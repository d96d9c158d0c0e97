"""Unit tests for the unit of work commit hooks."""

import pytest

from taskboard.persistence.repository.inmemory import InMemoryUnitOfWork


class TestUnitOfWork:
    """Tests for after-commit actions."""

    @pytest.mark.asyncio
    async def test_actions_run_once_after_commit_in_order(self):
        # Arrange
        unit_of_work = InMemoryUnitOfWork()
        calls: list[tuple[str, int]] = []

        async def record(name: str) -> None:
            calls.append((name, unit_of_work.commits))

        unit_of_work.after_commit(lambda: record("first"))
        unit_of_work.after_commit(lambda: record("second"))

        # Act
        await unit_of_work.commit()
        await unit_of_work.commit()

        # Assert
        assert calls == [("first", 1), ("second", 1)]
        assert unit_of_work.commits == 2

    @pytest.mark.asyncio
    async def test_discard_drops_queued_actions(self):
        unit_of_work = InMemoryUnitOfWork()
        calls: list[str] = []

        async def record() -> None:
            calls.append("ran")

        unit_of_work.after_commit(record)
        unit_of_work.discard()
        await unit_of_work.commit()

        assert calls == []
