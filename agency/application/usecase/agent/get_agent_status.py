"""Get agent status use case."""

from uuid import UUID

from pydantic import BaseModel

from agency.application.usecase.base import BaseUseCase
from agency.application.usecase.suspension import SuspensionItem
from agency.domain.service import Clock, LifecycleService
from agency.domain.value import AgentId, AgentStanding


class GetAgentStatusRequest(BaseModel):
    """Request for an agent's dashboard status."""

    agent_id: UUID


class GetAgentStatusResponse(BaseModel):
    """What the agent dashboard should allow."""

    agent_id: UUID
    approved: bool
    standing: AgentStanding
    suspension: SuspensionItem | None


class GetAgentStatusUseCase(BaseUseCase):
    """Use case for the agent dashboard gate."""

    def __init__(self, lifecycle_service: LifecycleService, clock: Clock) -> None:
        self.lifecycle_service = lifecycle_service
        self.clock = clock

    async def execute(self, request: GetAgentStatusRequest) -> GetAgentStatusResponse:
        """Execute get agent status use case.

        Raises:
            NotFoundError: If no invitation references the agent
        """
        lifecycle = await self.lifecycle_service.get_agent_lifecycle(
            AgentId(request.agent_id), self.clock.now()
        )
        return GetAgentStatusResponse(
            agent_id=lifecycle.agent_id,
            approved=lifecycle.approved,
            standing=lifecycle.standing,
            suspension=(
                SuspensionItem.from_view(lifecycle.suspension)
                if lifecycle.suspension
                else None
            ),
        )
