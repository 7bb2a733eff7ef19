"""Approve agent use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from agency.application.usecase.base import BaseUseCase
from agency.domain.error import NotFoundError
from agency.domain.service import Clock, InvitationService, LifecycleService
from agency.domain.value import AgentId, InvitationStatus, LandlordId


class ApproveAgentRequest(BaseModel):
    """Request to approve an agent."""

    landlord_id: UUID
    agent_id: UUID


class ApproveAgentResponse(BaseModel):
    """Response after approving an agent."""

    agent_id: str
    email: str
    status: InvitationStatus
    approved_at: datetime


class ApproveAgentUseCase(BaseUseCase):
    """Use case for a landlord approving an agent who registered."""

    def __init__(
        self,
        invitation_service: InvitationService,
        lifecycle_service: LifecycleService,
        clock: Clock,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            lifecycle_service: Lifecycle query facade
            clock: Source of the current time
        """
        self.invitation_service = invitation_service
        self.lifecycle_service = lifecycle_service
        self.clock = clock

    async def execute(self, request: ApproveAgentRequest) -> ApproveAgentResponse:
        """Append APPROVED for the agent's invitation.

        Args:
            request: Approve agent request

        Returns:
            The approved invitation

        Raises:
            NotFoundError: If the landlord has no invitation awaiting
                approval for this agent
        """
        landlord_id = LandlordId(request.landlord_id)
        agent_id = AgentId(request.agent_id)
        now = self.clock.now()

        with logfire.span(
            "approve_agent", landlord_id=str(landlord_id), agent_id=str(agent_id)
        ):
            invitation = await self.lifecycle_service.find_invitation_for_agent(
                landlord_id, agent_id, now
            )
            if (
                invitation is None
                or invitation.status != InvitationStatus.PENDING_APPROVAL
            ):
                logfire.warn(
                    "No invitation awaiting approval",
                    landlord_id=str(landlord_id),
                    agent_id=str(agent_id),
                    status=invitation.status.value if invitation else None,
                )
                raise NotFoundError("Invitation awaiting approval", str(agent_id))

            event = await self.invitation_service.record_approved(invitation, now)

            return ApproveAgentResponse(
                agent_id=str(agent_id),
                email=event.email,
                status=InvitationStatus.APPROVED,
                approved_at=event.issued_at,
            )
