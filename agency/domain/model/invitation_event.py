"""Invitation log events.

The invitation lifecycle is never stored as a row per invitation. Instead
every landlord or registration action appends one of these events, and the
current state is derived on each read by folding all events that share a
normalized email.

Business rules:
- Events are never mutated or deleted
- Only SENT events carry a token and an expiry
- ACCOUNT_CREATED and APPROVED link the invitation to the created agent
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import AwareDatetime, Field, field_validator, model_validator

from agency.domain.model.common import DomainModel
from agency.domain.value import (
    AgentId,
    EventId,
    InvitationEventKind,
    InviteToken,
    LandlordId,
    UserId,
)
from agency.domain.value.email import normalize_email


class InvitationEventBase(DomainModel):
    """Fields shared by every invitation event."""

    id: EventId
    email: str  # Merge key, always normalized
    landlord_id: LandlordId
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    issued_at: AwareDatetime
    sequence: int | None = None  # Assigned by the event store on append

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Store only the normalized merge key."""
        return normalize_email(v)

    @field_validator("first_name", "last_name", "phone")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        """Treat blank profile fields as absent."""
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def order_key(self) -> tuple[datetime, int]:
        """Sort key: timestamp, then insertion sequence."""
        return (self.issued_at, self.sequence if self.sequence is not None else 0)


class InvitationSent(InvitationEventBase):
    """A landlord invited an email address."""

    kind: Literal[InvitationEventKind.SENT] = InvitationEventKind.SENT
    token: InviteToken
    expires_at: AwareDatetime

    @model_validator(mode="after")
    def validate_expiry(self) -> "InvitationSent":
        """An invitation must expire after it was sent."""
        if self.expires_at <= self.issued_at:
            raise ValueError("expires_at must be after issued_at")
        return self

    def is_live_at(self, when: datetime) -> bool:
        """Whether the token is still unexpired at the given instant."""
        return when <= self.expires_at


class AgentAccountCreated(InvitationEventBase):
    """The invited worker redeemed the token and an account now exists."""

    kind: Literal[InvitationEventKind.ACCOUNT_CREATED] = (
        InvitationEventKind.ACCOUNT_CREATED
    )
    agent_id: AgentId
    agent_user_id: UserId


class AgentApproved(InvitationEventBase):
    """The landlord approved the agent account."""

    kind: Literal[InvitationEventKind.APPROVED] = InvitationEventKind.APPROVED
    agent_id: AgentId
    agent_user_id: UserId


InvitationEvent = Annotated[
    Union[InvitationSent, AgentAccountCreated, AgentApproved],
    Field(discriminator="kind"),
]

EVENT_TYPES: dict[InvitationEventKind, type[InvitationEventBase]] = {
    InvitationEventKind.SENT: InvitationSent,
    InvitationEventKind.ACCOUNT_CREATED: AgentAccountCreated,
    InvitationEventKind.APPROVED: AgentApproved,
}
