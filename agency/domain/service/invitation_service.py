"""Invitation domain service.

Writes invitation events to the log. All reads of invitation state go
through the reducer; this service never stores a status.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from agency.domain.error import ConflictError, NotFoundError, ValidationError
from agency.domain.model import (
    AgentAccountCreated,
    AgentApproved,
    DerivedInvitation,
    InvitationEventBase,
    InvitationSent,
)
from agency.domain.repository import InvitationEventRepository
from agency.domain.value import (
    AgentId,
    EventId,
    InviteToken,
    LandlordId,
    UserId,
    normalize_email,
)

from .base import Service
from .invitation_reducer import reduce_invitation


def _build_event(event_type: type[InvitationEventBase], **fields) -> InvitationEventBase:
    """Construct an event, reporting missing or malformed fields as ValidationError."""
    try:
        return event_type(id=EventId(uuid4()), **fields)
    except PydanticValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ValidationError(f"Invalid {event_type.__name__} event: {fields}") from e


class InvitationService(Service):
    """Domain service that appends invitation lifecycle events."""

    def __init__(self, event_repository: InvitationEventRepository) -> None:
        """Initialize invitation service.

        Args:
            event_repository: Invitation event log
        """
        self.event_repository = event_repository

    async def record_sent(
        self,
        landlord_id: LandlordId,
        email: str,
        token: InviteToken,
        issued_at: datetime,
        expires_at: datetime,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
    ) -> InvitationSent:
        """Append a SENT event.

        Args:
            landlord_id: Inviting landlord
            email: Invitee email (normalized on construction)
            token: Fresh invitation token
            issued_at: When the invitation was sent
            expires_at: When the token stops being redeemable
            first_name: Optional invitee first name
            last_name: Optional invitee last name
            phone: Optional invitee phone

        Returns:
            The appended event

        Raises:
            ValidationError: If the event is malformed
            ConflictError: If the token collides with a live token
        """
        with logfire.span(
            "invitation_service.record_sent",
            landlord_id=str(landlord_id),
            token=token.prefix,
        ):
            event = _build_event(
                InvitationSent,
                landlord_id=landlord_id,
                email=email,
                token=token,
                issued_at=issued_at,
                expires_at=expires_at,
                first_name=first_name,
                last_name=last_name,
                phone=phone,
            )
            await self.event_repository.append(event)
            logfire.info(
                "Invitation sent",
                event_id=str(event.id),
                landlord_id=str(landlord_id),
                email=event.email,
                expires_at=event.expires_at.isoformat(),
            )
            return event

    async def record_account_created(
        self,
        email: str,
        agent_id: AgentId,
        agent_user_id: UserId,
        issued_at: datetime,
        landlord_id: LandlordId | None = None,
        phone: str | None = None,
    ) -> AgentAccountCreated:
        """Append an ACCOUNT_CREATED event.

        Called once the agent's user record is durably written. The event is
        attributed to the given landlord, or to the landlord of the latest
        invitation sent to the email.

        Args:
            email: Email the account was created for
            agent_id: New agent record
            agent_user_id: New user record
            issued_at: When the account was created
            landlord_id: Owning landlord if already known
            phone: Phone captured at registration

        Returns:
            The appended event

        Raises:
            NotFoundError: If the email was never invited
            ConflictError: If the invitation already has an account
            ValidationError: If the event is malformed
        """
        with logfire.span(
            "invitation_service.record_account_created",
            agent_id=str(agent_id),
        ):
            normalized = normalize_email(email)
            events = await self.event_repository.query_by_email(normalized)
            sent = [e for e in events if isinstance(e, InvitationSent)]
            if not sent:
                logfire.warn("Account created for uninvited email", email=normalized)
                raise NotFoundError("Invitation", normalized)

            invitation = reduce_invitation(events, issued_at)
            if invitation.has_account:
                logfire.warn(
                    "Invitation already has an account",
                    email=normalized,
                    linked_agent_id=str(invitation.agent_id),
                )
                raise ConflictError(f"An account already exists for {normalized}")

            if landlord_id is None:
                landlord_id = sent[-1].landlord_id

            event = _build_event(
                AgentAccountCreated,
                landlord_id=landlord_id,
                email=email,
                agent_id=agent_id,
                agent_user_id=agent_user_id,
                issued_at=issued_at,
                phone=phone,
            )
            await self.event_repository.append(event)
            logfire.info(
                "Agent account recorded",
                event_id=str(event.id),
                landlord_id=str(landlord_id),
                agent_id=str(agent_id),
                email=event.email,
            )
            return event

    async def record_approved(
        self, invitation: DerivedInvitation, issued_at: datetime
    ) -> AgentApproved:
        """Append an APPROVED event for an invitation with an account.

        Args:
            invitation: Derived invitation in PENDING_APPROVAL
            issued_at: When the landlord approved

        Returns:
            The appended event

        Raises:
            ValidationError: If the invitation has no linked agent
        """
        with logfire.span(
            "invitation_service.record_approved",
            landlord_id=str(invitation.landlord_id),
            agent_id=str(invitation.agent_id),
        ):
            event = _build_event(
                AgentApproved,
                landlord_id=invitation.landlord_id,
                email=invitation.email,
                agent_id=invitation.agent_id,
                agent_user_id=invitation.agent_user_id,
                issued_at=issued_at,
            )
            await self.event_repository.append(event)
            logfire.info(
                "Agent approved",
                event_id=str(event.id),
                landlord_id=str(invitation.landlord_id),
                agent_id=str(invitation.agent_id),
            )
            return event
