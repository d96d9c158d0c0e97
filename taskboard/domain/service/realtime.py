"""Realtime task event port."""

from abc import ABC, abstractmethod

from taskboard.domain.model.event import TaskEvent


class TaskEventPublisher(ABC):
    """Publishes task events to project channels.

    Delivery is advisory. Implementations must not block on slow
    subscribers.
    """

    @abstractmethod
    async def publish(self, event: TaskEvent) -> None:
        """Publish an event on ``event.channel``."""
        pass
