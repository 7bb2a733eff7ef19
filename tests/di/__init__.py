"""Mock providers for testing."""

from .clock import FixedClockProvider
from .container import build_test_container
from .persistence import MockPersistenceProvider

__all__ = [
    "FixedClockProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
