"""Mock providers for testing."""

from .clock import MockClockProvider
from .notifications import MockNotificationsProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockNotificationsProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
