"""Mock providers for testing."""

# Importing the mocks registers them as component implementations
from .email import MockEmailProvider
from .persistence import MockPersistenceProvider
from .realtime import MockRealtimeProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockPersistenceProvider",
    "MockRealtimeProvider",
    "build_test_container",
]
