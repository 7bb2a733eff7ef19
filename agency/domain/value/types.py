"""Domain value objects for the agent lifecycle.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from agency.domain.value.common import RootValueObject, ValueObject


class InvitationEventKind(str, Enum):
    """Kind of an invitation log event."""

    SENT = "sent"
    ACCOUNT_CREATED = "account_created"
    APPROVED = "approved"


class InvitationStatus(str, Enum):
    """Derived status of an invitation.

    PENDING -> PENDING_APPROVAL -> APPROVED only ever moves forward.
    EXPIRED is applied last and only to PENDING.
    """

    PENDING = "pending"
    PENDING_APPROVAL = "pending_approval"
    APPROVED = "approved"
    EXPIRED = "expired"

    @property
    def rank(self) -> int:
        """Position on the forward-only progression."""
        return _STATUS_RANK[self]


_STATUS_RANK = {
    InvitationStatus.PENDING: 0,
    InvitationStatus.EXPIRED: 0,
    InvitationStatus.PENDING_APPROVAL: 1,
    InvitationStatus.APPROVED: 2,
}


class SuspensionReason(str, Enum):
    """Reason codes a landlord can give when suspending an agent."""

    TERMINATING_CONTRACT = "TERMINATING_CONTRACT"
    POOR_PERFORMANCE = "POOR_PERFORMANCE"
    VIOLATION_OF_TERMS = "VIOLATION_OF_TERMS"
    BREACH_OF_CONTRACT = "BREACH_OF_CONTRACT"
    MUTUAL_AGREEMENT = "MUTUAL_AGREEMENT"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        """Human-readable label shown to the agent."""
        return self.value.replace("_", " ").title().replace(" Of ", " of ")


class AgentStanding(str, Enum):
    """What the agent dashboard lets an agent do."""

    PENDING_APPROVAL = "pending_approval"  # Waiting on the landlord
    SUSPENDED = "suspended"  # View-only
    ACTIVE = "active"  # Full access


class UserRole(str, Enum):
    """Roles known to the user directory."""

    ADMIN = "ADMIN"
    LANDLORD = "LANDLORD"
    AGENT = "AGENT"
    TENANT = "TENANT"


class InviteToken(RootValueObject[str]):
    """Opaque invitation token carried in the registration link."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Token must be 1-255 characters")
        return v

    @property
    def prefix(self) -> str:
        """Loggable token prefix."""
        return self.root[:8] + "..."


class AgentProfile(ValueObject):
    """Profile snapshot used to pre-fill registration and create users."""

    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
