"""Invitation event log interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from agency.domain.model import InvitationEvent, InvitationSent
from agency.domain.value import AgentId, EventId, InviteToken, LandlordId


class InvitationEventRepository(ABC):
    """Append-only store of invitation events.

    Append is the only mutation. Every query returns events in ascending
    (issued_at, sequence) order and operates on a snapshot of the log, so
    reads never block appends.
    """

    @abstractmethod
    async def append(self, event: InvitationEvent) -> EventId:
        """Append an event to the log.

        The store assigns the event's sequence number. Sequence numbers are
        strictly increasing in commit order and break ties between events
        with equal issued_at.

        Args:
            event: The event to append

        Returns:
            The event's ID

        Raises:
            ConflictError: If a SENT event's token collides with the token
                of an existing SENT event that is still unexpired
        """
        pass

    @abstractmethod
    async def query_by_landlord(
        self, landlord_id: LandlordId
    ) -> Sequence[InvitationEvent]:
        """All events owned by a landlord.

        Args:
            landlord_id: The owning landlord

        Returns:
            Events in log order
        """
        pass

    @abstractmethod
    async def query_by_email(self, email: str) -> Sequence[InvitationEvent]:
        """All events for a normalized email, across landlords.

        Args:
            email: Normalized email

        Returns:
            Events in log order
        """
        pass

    @abstractmethod
    async def query_by_agent(self, agent_id: AgentId) -> Sequence[InvitationEvent]:
        """Events that reference an agent (ACCOUNT_CREATED and APPROVED).

        Args:
            agent_id: The agent

        Returns:
            Events in log order
        """
        pass

    @abstractmethod
    async def find_sent_by_token(self, token: InviteToken) -> InvitationSent | None:
        """Find the SENT event carrying a token.

        Args:
            token: The invitation token

        Returns:
            The SENT event if found, None otherwise
        """
        pass
