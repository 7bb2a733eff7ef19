"""Derived invitation views.

These are computed on every read from the invitation event log and are
never persisted.
"""

from datetime import datetime

from agency.domain.model.common import DomainModel
from agency.domain.value import (
    AgentId,
    InvitationStatus,
    InviteToken,
    LandlordId,
    UserId,
)


class DerivedInvitation(DomainModel):
    """Current state of one invitation, reduced from its events."""

    email: str
    landlord_id: LandlordId
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    token: InviteToken
    expires_at: datetime
    agent_id: AgentId | None = None
    agent_user_id: UserId | None = None
    status: InvitationStatus
    sent_at: datetime  # Earliest SENT event
    account_created_at: datetime | None = None
    approved_at: datetime | None = None
    last_activity_at: datetime  # Latest event of any kind

    @property
    def has_account(self) -> bool:
        """Whether an agent account exists for this invitation."""
        return self.status in (
            InvitationStatus.PENDING_APPROVAL,
            InvitationStatus.APPROVED,
        )


class VerificationResult(DomainModel):
    """Profile snapshot returned for a redeemable token."""

    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    landlord_id: LandlordId
    expires_at: datetime
