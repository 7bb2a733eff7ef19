"""Unsuspend agent use case."""

from uuid import UUID

from pydantic import BaseModel

from agency.application.usecase.base import BaseUseCase
from agency.domain.service import Clock, LifecycleService, SuspensionService
from agency.domain.value import AgentId, LandlordId


class UnsuspendAgentRequest(BaseModel):
    """Request to lift an agent's suspension."""

    landlord_id: UUID
    agent_id: UUID


class UnsuspendAgentUseCase(BaseUseCase):
    """Use case for a landlord lifting a suspension."""

    def __init__(
        self,
        suspension_service: SuspensionService,
        lifecycle_service: LifecycleService,
        clock: Clock,
    ) -> None:
        """Initialize use case.

        Args:
            suspension_service: Suspension domain service
            lifecycle_service: Lifecycle query facade
            clock: Source of the current time
        """
        self.suspension_service = suspension_service
        self.lifecycle_service = lifecycle_service
        self.clock = clock

    async def execute(self, request: UnsuspendAgentRequest) -> bool:
        """Lift the suspension. Not an error if the agent is not suspended.

        Args:
            request: Unsuspend agent request

        Returns:
            True if a suspension was lifted

        Raises:
            NotFoundError: If the agent is not approved under the landlord
        """
        landlord_id = LandlordId(request.landlord_id)
        agent_id = AgentId(request.agent_id)

        await self.lifecycle_service.require_approved_agent(
            landlord_id, agent_id, self.clock.now()
        )
        return await self.suspension_service.unsuspend(agent_id)
