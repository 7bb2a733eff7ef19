"""Invitation reducer.

Folds invitation events into the current state of each invitation. This is
a pure computation over already-fetched, immutable events: the same events
and the same `now` always produce the same result, and no locks are held
while folding.

Status only moves forward (PENDING -> PENDING_APPROVAL -> APPROVED), so a
duplicated or reordered event can never revoke an approved agent. Expiry is
evaluated last and only turns a still-PENDING invitation into EXPIRED.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import datetime

from agency.domain.error import NotFoundError, ValidationError
from agency.domain.model import (
    AgentAccountCreated,
    AgentApproved,
    DerivedInvitation,
    InvitationEvent,
    InvitationSent,
)
from agency.domain.value import InvitationStatus, normalize_email

_PROFILE_FIELDS = ("first_name", "last_name", "phone")


class _InvitationFold:
    """Mutable accumulator for one invitation while folding."""

    def __init__(self, seed: InvitationSent) -> None:
        self.fields: dict = {
            "email": seed.email,
            "landlord_id": seed.landlord_id,
            "first_name": seed.first_name,
            "last_name": seed.last_name,
            "phone": seed.phone,
            "token": seed.token,
            "expires_at": seed.expires_at,
            "sent_at": seed.issued_at,
            "last_activity_at": seed.issued_at,
        }
        self.status = InvitationStatus.PENDING

    def apply(self, event: InvitationEvent) -> None:
        if isinstance(event, InvitationSent):
            # Re-invite: refresh the token, never reset an advanced status
            self.fields["token"] = event.token
            self.fields["expires_at"] = event.expires_at
        elif isinstance(event, AgentAccountCreated):
            # The first account wins; a retried event cannot relink the invitation
            if "agent_id" not in self.fields:
                self.fields["account_created_at"] = event.issued_at
                self._link_agent(event)
            self._raise_to(InvitationStatus.PENDING_APPROVAL)
        elif isinstance(event, AgentApproved):
            self.fields.setdefault("approved_at", event.issued_at)
            self._link_agent(event)
            self._raise_to(InvitationStatus.APPROVED)

        for name in _PROFILE_FIELDS:
            value = getattr(event, name)
            if value is not None:
                self.fields[name] = value

        if event.issued_at > self.fields["last_activity_at"]:
            self.fields["last_activity_at"] = event.issued_at

    def _link_agent(self, event: AgentAccountCreated | AgentApproved) -> None:
        self.fields.setdefault("agent_id", event.agent_id)
        self.fields.setdefault("agent_user_id", event.agent_user_id)

    def _raise_to(self, status: InvitationStatus) -> None:
        if status.rank > self.status.rank:
            self.status = status

    def result(self, now: datetime) -> DerivedInvitation:
        status = self.status
        if status == InvitationStatus.PENDING and now > self.fields["expires_at"]:
            status = InvitationStatus.EXPIRED
        return DerivedInvitation(status=status, **self.fields)


def _group_by_email(
    events: Iterable[InvitationEvent],
) -> dict[str, list[InvitationEvent]]:
    groups: dict[str, list[InvitationEvent]] = defaultdict(list)
    for event in events:
        groups[normalize_email(event.email)].append(event)
    return groups


def _reduce_group(
    events: Sequence[InvitationEvent], now: datetime
) -> DerivedInvitation | None:
    # sorted() is stable, so equal keys keep their input order
    ordered = sorted(events, key=lambda e: e.order_key)
    seed = next((e for e in ordered if isinstance(e, InvitationSent)), None)
    if seed is None:
        return None

    fold = _InvitationFold(seed)
    for event in ordered:
        if event is not seed:
            fold.apply(event)
    return fold.result(now)


def reduce_invitation(
    events: Iterable[InvitationEvent], now: datetime
) -> DerivedInvitation:
    """Reduce the events of one invitation identity.

    Args:
        events: Events sharing one normalized email, in any order
        now: Instant at which expiry is evaluated

    Returns:
        The derived invitation

    Raises:
        ValidationError: If the events span more than one email
        NotFoundError: If no SENT event exists for the email
    """
    groups = _group_by_email(events)
    if len(groups) > 1:
        raise ValidationError(
            f"Events span {len(groups)} emails; reduce one invitation at a time"
        )
    if not groups:
        raise NotFoundError("Invitation", "no events")

    email, group = next(iter(groups.items()))
    derived = _reduce_group(group, now)
    if derived is None:
        raise NotFoundError("Invitation", email)
    return derived


def reduce_invitations(
    events: Iterable[InvitationEvent], now: datetime
) -> list[DerivedInvitation]:
    """Reduce events into one derived invitation per email.

    Emails with no SENT event have no invitation and are skipped.

    Args:
        events: Events in any order, typically pre-filtered to one landlord
        now: Instant at which expiry is evaluated

    Returns:
        Derived invitations, most recently active first
    """
    derived: list[DerivedInvitation] = []
    for group in _group_by_email(events).values():
        invitation = _reduce_group(group, now)
        if invitation is not None:
            derived.append(invitation)

    derived.sort(key=lambda inv: inv.email)
    derived.sort(key=lambda inv: inv.last_activity_at, reverse=True)
    return derived
