"""Domain value objects for the agent lifecycle."""

from agency.domain.value.email import emails_match, normalize_email
from agency.domain.value.identifiers import AgentId, EventId, LandlordId, UserId
from agency.domain.value.types import (
    AgentProfile,
    AgentStanding,
    InvitationEventKind,
    InvitationStatus,
    InviteToken,
    SuspensionReason,
    UserRole,
)

__all__ = [
    # Identifiers
    "EventId",
    "LandlordId",
    "AgentId",
    "UserId",
    # Types
    "AgentProfile",
    "AgentStanding",
    "InvitationEventKind",
    "InvitationStatus",
    "InviteToken",
    "SuspensionReason",
    "UserRole",
    # Email identity
    "emails_match",
    "normalize_email",
]
