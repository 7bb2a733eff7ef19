"""In-memory repository implementations for testing."""

from .invitation_event import InMemoryInvitationEventRepository
from .suspension import InMemorySuspensionRepository
from .user_directory import InMemoryUserDirectory

__all__ = [
    "InMemoryInvitationEventRepository",
    "InMemorySuspensionRepository",
    "InMemoryUserDirectory",
]
