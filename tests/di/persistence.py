"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agency.domain.repository import (
    InvitationEventRepository,
    SuspensionRepository,
    UserDirectory,
)
from agency.persistence.repository.inmemory import (
    InMemoryInvitationEventRepository,
    InMemorySuspensionRepository,
    InMemoryUserDirectory,
)
from agency.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests made against one
    container, as it would in the database. Each test builds its own
    container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_invitation_event_repository(self) -> InvitationEventRepository:
        """Provide in-memory invitation event log."""
        return InMemoryInvitationEventRepository()

    @provide(scope=Scope.APP)
    def get_suspension_repository(self) -> SuspensionRepository:
        """Provide in-memory suspension repository."""
        return InMemorySuspensionRepository()

    @provide(scope=Scope.APP)
    def get_user_directory(self) -> UserDirectory:
        """Provide in-memory user directory."""
        return InMemoryUserDirectory()
