"""In-memory invitation event repository for testing."""

import asyncio
import itertools

from agency.domain.error import ConflictError
from agency.domain.model import InvitationEvent, InvitationSent
from agency.domain.repository import InvitationEventRepository
from agency.domain.value import AgentId, EventId, InviteToken, LandlordId


class InMemoryInvitationEventRepository(InvitationEventRepository):
    """In-memory implementation of InvitationEventRepository for testing.

    Appends are serialized by a lock and stamped with a monotonic sequence,
    so concurrent writers get the same ordering guarantees as the database.
    """

    def __init__(self) -> None:
        self._events: list[InvitationEvent] = []
        self._sequence = itertools.count(1)
        self._lock = asyncio.Lock()

    async def append(self, event: InvitationEvent) -> EventId:
        """Append an event, stamping its sequence.

        Raises:
            ConflictError: If the event id exists or a SENT reuses a live token
        """
        async with self._lock:
            if any(existing.id == event.id for existing in self._events):
                raise ConflictError(f"Event {event.id} already recorded")

            if isinstance(event, InvitationSent):
                for existing in self._events:
                    if (
                        isinstance(existing, InvitationSent)
                        and existing.token == event.token
                        and existing.is_live_at(event.issued_at)
                    ):
                        raise ConflictError(
                            "Invitation token is already in use by a live invitation"
                        )

            stamped = event.model_copy(update={"sequence": next(self._sequence)})
            self._events.append(stamped)
            return stamped.id

    def _ordered(self, events: list[InvitationEvent]) -> list[InvitationEvent]:
        return sorted(events, key=lambda e: e.order_key)

    async def query_by_landlord(
        self, landlord_id: LandlordId
    ) -> list[InvitationEvent]:
        """Events attributed to a landlord."""
        return self._ordered([e for e in self._events if e.landlord_id == landlord_id])

    async def query_by_email(self, email: str) -> list[InvitationEvent]:
        """Events for a normalized email."""
        return self._ordered([e for e in self._events if e.email == email])

    async def query_by_agent(self, agent_id: AgentId) -> list[InvitationEvent]:
        """Events that reference an agent."""
        return self._ordered(
            [e for e in self._events if getattr(e, "agent_id", None) == agent_id]
        )

    async def find_sent_by_token(self, token: InviteToken) -> InvitationSent | None:
        """Latest SENT event carrying the token."""
        matches = [
            e
            for e in self._events
            if isinstance(e, InvitationSent) and e.token == token
        ]
        if not matches:
            return None
        return self._ordered(matches)[-1]
