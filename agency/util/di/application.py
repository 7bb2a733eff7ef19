"""Application layer DI providers."""

from dishka import Scope, provide

from agency.application.usecase.agent import GetAgentStatusUseCase
from agency.application.usecase.invitation import (
    ApproveAgentUseCase,
    GetInvitationsUseCase,
    RecordAccountCreatedUseCase,
    SendInvitationUseCase,
    VerifyInvitationUseCase,
)
from agency.application.usecase.registration import RegisterAgentUseCase
from agency.application.usecase.suspension import (
    SuspendAgentUseCase,
    UnsuspendAgentUseCase,
)
from agency.config import InvitationSettings, Settings
from agency.domain.repository import UserDirectory
from agency.domain.service import (
    Clock,
    InvitationService,
    LifecycleService,
    SuspensionService,
    TokenVerifier,
)
from agency.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invitation use cases
    @provide(scope=Scope.REQUEST)
    def get_send_invitation_use_case(
        self,
        invitation_service: InvitationService,
        user_directory: UserDirectory,
        clock: Clock,
        invitation_settings: InvitationSettings,
        settings: Settings,
    ) -> SendInvitationUseCase:
        """Provide send invitation use case."""
        return SendInvitationUseCase(
            invitation_service=invitation_service,
            user_directory=user_directory,
            clock=clock,
            settings=invitation_settings,
            frontend_url=settings.api.frontend_url,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invitations_use_case(
        self, lifecycle_service: LifecycleService, clock: Clock
    ) -> GetInvitationsUseCase:
        """Provide get invitations use case."""
        return GetInvitationsUseCase(lifecycle_service=lifecycle_service, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_verify_invitation_use_case(
        self, token_verifier: TokenVerifier, clock: Clock
    ) -> VerifyInvitationUseCase:
        """Provide verify invitation use case."""
        return VerifyInvitationUseCase(token_verifier=token_verifier, clock=clock)

    @provide(scope=Scope.REQUEST)
    def get_record_account_created_use_case(
        self, invitation_service: InvitationService, clock: Clock
    ) -> RecordAccountCreatedUseCase:
        """Provide record account created use case."""
        return RecordAccountCreatedUseCase(
            invitation_service=invitation_service, clock=clock
        )

    @provide(scope=Scope.REQUEST)
    def get_approve_agent_use_case(
        self,
        invitation_service: InvitationService,
        lifecycle_service: LifecycleService,
        clock: Clock,
    ) -> ApproveAgentUseCase:
        """Provide approve agent use case."""
        return ApproveAgentUseCase(
            invitation_service=invitation_service,
            lifecycle_service=lifecycle_service,
            clock=clock,
        )

    # Registration use cases
    @provide(scope=Scope.REQUEST)
    def get_register_agent_use_case(
        self,
        token_verifier: TokenVerifier,
        invitation_service: InvitationService,
        user_directory: UserDirectory,
        clock: Clock,
    ) -> RegisterAgentUseCase:
        """Provide register agent use case."""
        return RegisterAgentUseCase(
            token_verifier=token_verifier,
            invitation_service=invitation_service,
            user_directory=user_directory,
            clock=clock,
        )

    # Suspension use cases
    @provide(scope=Scope.REQUEST)
    def get_suspend_agent_use_case(
        self,
        suspension_service: SuspensionService,
        lifecycle_service: LifecycleService,
        clock: Clock,
    ) -> SuspendAgentUseCase:
        """Provide suspend agent use case."""
        return SuspendAgentUseCase(
            suspension_service=suspension_service,
            lifecycle_service=lifecycle_service,
            clock=clock,
        )

    @provide(scope=Scope.REQUEST)
    def get_unsuspend_agent_use_case(
        self,
        suspension_service: SuspensionService,
        lifecycle_service: LifecycleService,
        clock: Clock,
    ) -> UnsuspendAgentUseCase:
        """Provide unsuspend agent use case."""
        return UnsuspendAgentUseCase(
            suspension_service=suspension_service,
            lifecycle_service=lifecycle_service,
            clock=clock,
        )

    # Agent use cases
    @provide(scope=Scope.REQUEST)
    def get_get_agent_status_use_case(
        self, lifecycle_service: LifecycleService, clock: Clock
    ) -> GetAgentStatusUseCase:
        """Provide get agent status use case."""
        return GetAgentStatusUseCase(lifecycle_service=lifecycle_service, clock=clock)
