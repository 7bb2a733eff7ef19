"""Domain model entities for the agent lifecycle."""

from agency.domain.model.agent import AgentLifecycle
from agency.domain.model.invitation import DerivedInvitation, VerificationResult
from agency.domain.model.invitation_event import (
    EVENT_TYPES,
    AgentAccountCreated,
    AgentApproved,
    InvitationEvent,
    InvitationEventBase,
    InvitationSent,
)
from agency.domain.model.suspension import SuspensionRecord, SuspensionView

__all__ = [
    "EVENT_TYPES",
    "AgentAccountCreated",
    "AgentApproved",
    "AgentLifecycle",
    "DerivedInvitation",
    "InvitationEvent",
    "InvitationEventBase",
    "InvitationSent",
    "SuspensionRecord",
    "SuspensionView",
    "VerificationResult",
]
