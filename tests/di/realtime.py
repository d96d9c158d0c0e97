"""Mock realtime providers for testing."""

from dishka import Scope, provide

from taskboard.adapter.realtime import InProcessTaskEventBroker, MockTaskEventBroker
from taskboard.domain.service import TaskEventPublisher
from taskboard.util.di.infrastructure.realtime import RealtimeProvider


class MockRealtimeProvider(RealtimeProvider):
    """Mock realtime provider keeping every published event."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_mock_broker(self) -> MockTaskEventBroker:
        """Provide the recording broker."""
        return MockTaskEventBroker()

    @provide(scope=Scope.APP)
    def get_broker(self, broker: MockTaskEventBroker) -> InProcessTaskEventBroker:
        """Serve WebSocket subscribers from the recording broker."""
        return broker

    @provide(scope=Scope.APP)
    def get_publisher(self, broker: MockTaskEventBroker) -> TaskEventPublisher:
        """Publish through the recording broker."""
        return broker
