"""Mock providers for testing."""

from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .registration import MockRegistrationProvider
from .container import TEST_SECRET, build_test_container, make_test_settings

__all__ = [
    "MockNotificationProvider",
    "MockPersistenceProvider",
    "MockRegistrationProvider",
    "TEST_SECRET",
    "build_test_container",
    "make_test_settings",
]
