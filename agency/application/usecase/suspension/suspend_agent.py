"""Suspend agent use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from agency.application.usecase.base import BaseUseCase
from agency.domain.model import SuspensionView
from agency.domain.service import Clock, LifecycleService, SuspensionService
from agency.domain.value import AgentId, LandlordId, SuspensionReason


class SuspendAgentRequest(BaseModel):
    """Request to suspend an agent."""

    landlord_id: UUID
    agent_id: UUID
    reason_code: SuspensionReason
    reason_text: str | None = Field(default=None, max_length=1000)
    notes: str | None = Field(default=None, max_length=2000)
    duration_days: int


class SuspensionItem(BaseModel):
    """Suspension as shown to landlords and agents."""

    agent_id: UUID
    landlord_id: UUID
    reason_code: SuspensionReason
    reason_label: str
    reason_text: str | None
    notes: str | None
    duration_days: int
    started_at: datetime
    ends_at: datetime
    days_remaining: int
    is_expired_by_time: bool

    @classmethod
    def from_view(cls, view: SuspensionView) -> "SuspensionItem":
        record = view.record
        return cls(
            agent_id=record.agent_id,
            landlord_id=record.landlord_id,
            reason_code=record.reason_code,
            reason_label=view.reason_label,
            reason_text=record.reason_text,
            notes=record.notes,
            duration_days=record.duration_days,
            started_at=record.started_at,
            ends_at=record.ends_at,
            days_remaining=view.days_remaining,
            is_expired_by_time=view.is_expired_by_time,
        )


class SuspendAgentUseCase(BaseUseCase):
    """Use case for a landlord suspending one of their approved agents."""

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

    async def execute(self, request: SuspendAgentRequest) -> SuspensionItem:
        """Execute suspend agent use case.

        Args:
            request: Suspend agent request

        Returns:
            The new suspension

        Raises:
            NotFoundError: If the agent is not approved under the landlord
            ValidationError: If the duration or reason is invalid
        """
        landlord_id = LandlordId(request.landlord_id)
        agent_id = AgentId(request.agent_id)
        now = self.clock.now()

        await self.lifecycle_service.require_approved_agent(landlord_id, agent_id, now)
        record = await self.suspension_service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=request.reason_code,
            duration_days=request.duration_days,
            now=now,
            reason_text=request.reason_text,
            notes=request.notes,
        )
        return SuspensionItem.from_view(SuspensionView.at(record, now))
