"""Realtime event adapter."""

from .broker import InProcessTaskEventBroker, MockTaskEventBroker

__all__ = ["InProcessTaskEventBroker", "MockTaskEventBroker"]
