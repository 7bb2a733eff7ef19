"""Suspension records.

A suspension is an overlay on an approved agent's access, orthogonal to the
invitation status. There is at most one record per agent; suspending again
replaces it and unsuspending deletes it.
"""

import math
from datetime import datetime, timedelta

from pydantic import AwareDatetime, Field

from agency.domain.model.common import DomainModel
from agency.domain.value import AgentId, LandlordId, SuspensionReason


class SuspensionRecord(DomainModel):
    """Active suspension of one agent.

    Business rules:
    - duration_days is at least 1
    - reason_text is required when reason_code is OTHER
    - ends_at = started_at + duration_days
    """

    agent_id: AgentId
    landlord_id: LandlordId
    reason_code: SuspensionReason
    reason_text: str | None = None
    notes: str | None = None  # Visible to the agent
    duration_days: int = Field(ge=1)
    started_at: AwareDatetime
    ends_at: AwareDatetime

    @staticmethod
    def compute_ends_at(started_at: datetime, duration_days: int) -> datetime:
        """End of the suspension window."""
        return started_at + timedelta(days=duration_days)

    @property
    def reason_label(self) -> str:
        """Reason as shown to the agent: custom text for OTHER, else the label."""
        if self.reason_code == SuspensionReason.OTHER and self.reason_text:
            return self.reason_text
        return self.reason_code.label


class SuspensionView(DomainModel):
    """Suspension record annotated relative to a point in time."""

    record: SuspensionRecord
    is_expired_by_time: bool  # Advisory only, the record is not lifted
    days_remaining: int
    reason_label: str

    @classmethod
    def at(cls, record: SuspensionRecord, now: datetime) -> "SuspensionView":
        """Build the view of a record as of `now`."""
        remaining = (record.ends_at - now).total_seconds()
        return cls(
            record=record,
            is_expired_by_time=now > record.ends_at,
            days_remaining=max(0, math.ceil(remaining / 86400)),
            reason_label=record.reason_label,
        )
