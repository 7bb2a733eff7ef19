"""Record account created use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agency.application.usecase.base import BaseUseCase
from agency.domain.service import Clock, InvitationService
from agency.domain.value import AgentId, UserId


class RecordAccountCreatedRequest(BaseModel):
    """Notification that an agent's user record was written."""

    email: str = Field(min_length=3, max_length=255)
    agent_id: UUID
    agent_user_id: UUID


class RecordAccountCreatedUseCase(BaseUseCase):
    """Use case for linking an externally created account to its invitation."""

    def __init__(self, invitation_service: InvitationService, clock: Clock) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            clock: Source of the current time
        """
        self.invitation_service = invitation_service
        self.clock = clock

    async def execute(self, request: RecordAccountCreatedRequest) -> None:
        """Append ACCOUNT_CREATED for the latest invitation to the email.

        Args:
            request: Record account created request

        Raises:
            NotFoundError: If the email was never invited
        """
        await self.invitation_service.record_account_created(
            email=request.email,
            agent_id=AgentId(request.agent_id),
            agent_user_id=UserId(request.agent_user_id),
            issued_at=self.clock.now(),
        )
