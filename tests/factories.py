"""Builders for invitation events used across tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from agency.domain.model import AgentAccountCreated, AgentApproved, InvitationSent
from agency.domain.value import AgentId, EventId, InviteToken, LandlordId, UserId

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def sent(
    email: str,
    landlord_id: LandlordId,
    issued_at: datetime = T0,
    token: str | None = None,
    expires_in: timedelta = timedelta(days=7),
    sequence: int | None = None,
    **profile,
) -> InvitationSent:
    """Build a SENT event."""
    return InvitationSent(
        id=EventId(uuid4()),
        email=email,
        landlord_id=landlord_id,
        token=InviteToken(token or uuid4().hex),
        issued_at=issued_at,
        expires_at=issued_at + expires_in,
        sequence=sequence,
        **profile,
    )


def account_created(
    email: str,
    landlord_id: LandlordId,
    agent_id: AgentId,
    issued_at: datetime,
    agent_user_id: UserId | None = None,
    sequence: int | None = None,
    **profile,
) -> AgentAccountCreated:
    """Build an ACCOUNT_CREATED event."""
    return AgentAccountCreated(
        id=EventId(uuid4()),
        email=email,
        landlord_id=landlord_id,
        agent_id=agent_id,
        agent_user_id=agent_user_id or UserId(uuid4()),
        issued_at=issued_at,
        sequence=sequence,
        **profile,
    )


def approved(
    email: str,
    landlord_id: LandlordId,
    agent_id: AgentId,
    issued_at: datetime,
    agent_user_id: UserId | None = None,
    sequence: int | None = None,
) -> AgentApproved:
    """Build an APPROVED event."""
    return AgentApproved(
        id=EventId(uuid4()),
        email=email,
        landlord_id=landlord_id,
        agent_id=agent_id,
        agent_user_id=agent_user_id or UserId(uuid4()),
        issued_at=issued_at,
        sequence=sequence,
    )


