"""Realtime infrastructure providers."""

from dishka import Scope, provide

from taskboard.adapter.realtime import InProcessTaskEventBroker
from taskboard.config import RealtimeSettings
from taskboard.domain.service import TaskEventPublisher
from taskboard.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Realtime component base."""

    __mock_component__ = "realtime"


class ProdRealtimeProvider(RealtimeProvider):
    """Production realtime provider: one broker per process."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_broker(self, settings: RealtimeSettings) -> InProcessTaskEventBroker:
        """Provide the process-wide event broker."""
        return InProcessTaskEventBroker(queue_size=settings.queue_size)

    @provide(scope=Scope.APP)
    def get_publisher(self, broker: InProcessTaskEventBroker) -> TaskEventPublisher:
        """Publish through the broker."""
        return broker
