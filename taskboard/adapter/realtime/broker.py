"""In-process task event broker.

Fans events out to per-subscriber bounded queues. A subscriber that falls
behind loses events rather than slowing down publishers; clients refetch
on receipt anyway.
"""

import asyncio
from collections import defaultdict

import logfire

from taskboard.domain.model.event import TaskEvent
from taskboard.domain.service.realtime import TaskEventPublisher


class InProcessTaskEventBroker(TaskEventPublisher):
    """Channel-based pub/sub for a single process."""

    def __init__(self, queue_size: int = 100) -> None:
        """Initialize broker.

        Args:
            queue_size: Buffered events per subscriber before dropping
        """
        self.queue_size = queue_size
        self._channels: dict[str, set[asyncio.Queue[TaskEvent]]] = defaultdict(set)

    def subscribe(self, channel: str) -> asyncio.Queue[TaskEvent]:
        """Register a subscriber on ``channel``.

        Returns:
            Queue receiving the channel's events
        """
        queue: asyncio.Queue[TaskEvent] = asyncio.Queue(maxsize=self.queue_size)
        self._channels[channel].add(queue)
        logfire.info(
            "Realtime subscriber joined",
            channel=channel,
            subscribers=len(self._channels[channel]),
        )
        return queue

    def unsubscribe(self, channel: str, queue: asyncio.Queue[TaskEvent]) -> None:
        """Remove a subscriber. Unknown queues are ignored."""
        subscribers = self._channels.get(channel)
        if not subscribers:
            return
        subscribers.discard(queue)
        if not subscribers:
            del self._channels[channel]
        logfire.info("Realtime subscriber left", channel=channel)

    def subscriber_count(self, channel: str) -> int:
        """Number of live subscribers on ``channel``."""
        return len(self._channels.get(channel, ()))

    async def publish(self, event: TaskEvent) -> None:
        """Deliver an event to every subscriber of its channel without blocking."""
        channel = event.channel
        for queue in list(self._channels.get(channel, ())):
            try:
                queue.put_nowait(event)
            except asyncio.QueueFull:
                logfire.warn(
                    "Realtime subscriber queue full, dropping event",
                    channel=channel,
                    event_type=event.type.value,
                )


class MockTaskEventBroker(InProcessTaskEventBroker):
    """Broker that also keeps every published event for assertions."""

    def __init__(self, queue_size: int = 100) -> None:
        super().__init__(queue_size)
        self.published: list[TaskEvent] = []

    async def publish(self, event: TaskEvent) -> None:
        """Record, then deliver."""
        self.published.append(event)
        await super().publish(event)
