"""Unit tests for the in-process task event broker."""

from uuid import uuid4

import pytest

from taskboard.adapter.realtime import InProcessTaskEventBroker
from taskboard.domain.model import TaskEvent
from taskboard.domain.value import ProjectId, TaskEventType, TaskId


def _event(project_id: ProjectId) -> TaskEvent:
    return TaskEvent(
        type=TaskEventType.UPDATED, project_id=project_id, task_id=TaskId(uuid4())
    )


class TestInProcessTaskEventBroker:
    """Tests for InProcessTaskEventBroker."""

    @pytest.mark.asyncio
    async def test_event_reaches_every_subscriber_of_the_channel(self):
        # Arrange
        broker = InProcessTaskEventBroker()
        project_id = ProjectId(uuid4())
        channel = f"project_{project_id}"
        first = broker.subscribe(channel)
        second = broker.subscribe(channel)
        other = broker.subscribe(f"project_{uuid4()}")
        event = _event(project_id)

        # Act
        await broker.publish(event)

        # Assert
        assert first.get_nowait() == event
        assert second.get_nowait() == event
        assert other.empty()

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_a_no_op(self):
        broker = InProcessTaskEventBroker()

        await broker.publish(_event(ProjectId(uuid4())))

    @pytest.mark.asyncio
    async def test_full_queue_drops_instead_of_blocking(self):
        # Arrange
        broker = InProcessTaskEventBroker(queue_size=1)
        project_id = ProjectId(uuid4())
        queue = broker.subscribe(f"project_{project_id}")
        kept = _event(project_id)

        # Act
        await broker.publish(kept)
        await broker.publish(_event(project_id))

        # Assert
        assert queue.qsize() == 1
        assert queue.get_nowait() == kept

    def test_unsubscribe_removes_subscriber(self):
        # Arrange
        broker = InProcessTaskEventBroker()
        queue = broker.subscribe("project_x")

        # Act
        broker.unsubscribe("project_x", queue)
        broker.unsubscribe("project_x", queue)

        # Assert
        assert broker.subscriber_count("project_x") == 0
