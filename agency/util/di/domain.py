"""Domain layer DI providers."""

from dishka import Scope, provide

from agency.config import SuspensionSettings
from agency.domain.repository import InvitationEventRepository, SuspensionRepository
from agency.domain.service import (
    InvitationService,
    LifecycleService,
    SuspensionService,
    TokenVerifier,
)
from agency.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_invitation_service(
        self, event_repository: InvitationEventRepository
    ) -> InvitationService:
        """Provide invitation domain service."""
        return InvitationService(event_repository=event_repository)

    @provide
    def get_token_verifier(
        self, event_repository: InvitationEventRepository
    ) -> TokenVerifier:
        """Provide token verifier domain service."""
        return TokenVerifier(event_repository=event_repository)

    @provide
    def get_suspension_service(
        self,
        suspension_repository: SuspensionRepository,
        settings: SuspensionSettings,
    ) -> SuspensionService:
        """Provide suspension domain service."""
        return SuspensionService(
            suspension_repository=suspension_repository, settings=settings
        )

    @provide
    def get_lifecycle_service(
        self,
        event_repository: InvitationEventRepository,
        suspension_service: SuspensionService,
    ) -> LifecycleService:
        """Provide lifecycle query facade."""
        return LifecycleService(
            event_repository=event_repository, suspension_service=suspension_service
        )
