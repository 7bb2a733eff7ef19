"""Suspension domain service."""

from datetime import datetime

import logfire

from agency.config import SuspensionSettings
from agency.domain.error import ValidationError
from agency.domain.model import SuspensionRecord, SuspensionView
from agency.domain.repository import SuspensionRepository
from agency.domain.value import AgentId, LandlordId, SuspensionReason

from .base import Service


class SuspensionService(Service):
    """Tracks the time-bounded suspension overlay on approved agents.

    A suspension whose window has passed is reported as expired by time but
    is not removed; lifting it is always an explicit unsuspend.
    """

    def __init__(
        self,
        suspension_repository: SuspensionRepository,
        settings: SuspensionSettings,
    ) -> None:
        """Initialize suspension service.

        Args:
            suspension_repository: Suspension store
            settings: Suspension limits
        """
        self.suspension_repository = suspension_repository
        self.settings = settings

    def _validate(
        self,
        reason_code: SuspensionReason,
        reason_text: str | None,
        duration_days: int,
    ) -> None:
        if duration_days < 1:
            raise ValidationError("Suspension duration must be at least 1 day")
        if duration_days > self.settings.max_duration_days:
            raise ValidationError(
                f"Suspension duration cannot exceed "
                f"{self.settings.max_duration_days} days"
            )
        if reason_code == SuspensionReason.OTHER and not (reason_text or "").strip():
            raise ValidationError("A reason must be written when the reason is OTHER")

    async def suspend(
        self,
        agent_id: AgentId,
        landlord_id: LandlordId,
        reason_code: SuspensionReason,
        duration_days: int,
        now: datetime,
        reason_text: str | None = None,
        notes: str | None = None,
    ) -> SuspensionRecord:
        """Suspend an agent, replacing any current suspension.

        Args:
            agent_id: Agent to suspend
            landlord_id: Landlord imposing the suspension
            reason_code: Disclosed reason
            duration_days: Length of the window in days
            now: Start of the window
            reason_text: Verbatim reason, required for OTHER
            notes: Optional notes shown to the agent

        Returns:
            The stored suspension

        Raises:
            ValidationError: If the duration or reason is invalid
        """
        with logfire.span(
            "suspension_service.suspend",
            agent_id=str(agent_id),
            landlord_id=str(landlord_id),
            reason_code=reason_code.value,
            duration_days=duration_days,
        ):
            self._validate(reason_code, reason_text, duration_days)

            record = SuspensionRecord(
                agent_id=agent_id,
                landlord_id=landlord_id,
                reason_code=reason_code,
                reason_text=reason_text.strip() if reason_text else None,
                notes=notes.strip() if notes and notes.strip() else None,
                duration_days=duration_days,
                started_at=now,
                ends_at=SuspensionRecord.compute_ends_at(now, duration_days),
            )
            saved = await self.suspension_repository.replace(record)
            logfire.info(
                "Agent suspended",
                agent_id=str(agent_id),
                ends_at=saved.ends_at.isoformat(),
            )
            return saved

    async def unsuspend(self, agent_id: AgentId) -> bool:
        """Lift an agent's suspension. No-op if the agent is not suspended.

        Args:
            agent_id: Agent to unsuspend

        Returns:
            True if a suspension was lifted
        """
        with logfire.span("suspension_service.unsuspend", agent_id=str(agent_id)):
            removed = await self.suspension_repository.delete(agent_id)
            if removed:
                logfire.info("Agent unsuspended", agent_id=str(agent_id))
            else:
                logfire.info("Agent was not suspended", agent_id=str(agent_id))
            return removed

    async def current_suspension(
        self, agent_id: AgentId, now: datetime
    ) -> SuspensionView | None:
        """Current suspension of an agent, annotated as of `now`.

        Args:
            agent_id: The agent
            now: Instant used for the expiry flag and countdown

        Returns:
            The suspension view, None if the agent is not suspended
        """
        record = await self.suspension_repository.find_by_agent(agent_id)
        if record is None:
            return None
        return SuspensionView.at(record, now)
