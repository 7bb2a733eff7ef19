"""Lifecycle query facade.

Combines reduced invitations with the suspension overlay. Every call
recomputes state from the event log and the suspension store; there is no
cached status to drift.
"""

from datetime import datetime

import logfire

from agency.domain.error import NotFoundError
from agency.domain.model import AgentLifecycle, DerivedInvitation, SuspensionView
from agency.domain.repository import InvitationEventRepository
from agency.domain.value import AgentId, InvitationStatus, LandlordId

from .base import Service
from .invitation_reducer import reduce_invitations
from .suspension_service import SuspensionService


class LifecycleService(Service):
    """Read API over invitations and suspensions."""

    def __init__(
        self,
        event_repository: InvitationEventRepository,
        suspension_service: SuspensionService,
    ) -> None:
        """Initialize lifecycle service.

        Args:
            event_repository: Invitation event log
            suspension_service: Suspension tracker
        """
        self.event_repository = event_repository
        self.suspension_service = suspension_service

    async def list_invitations_for_landlord(
        self, landlord_id: LandlordId, now: datetime
    ) -> list[DerivedInvitation]:
        """Derived invitations of a landlord, one per email.

        Args:
            landlord_id: The landlord
            now: Instant at which expiry is evaluated

        Returns:
            Invitations, most recently active first
        """
        with logfire.span(
            "lifecycle_service.list_invitations_for_landlord",
            landlord_id=str(landlord_id),
        ):
            events = await self.event_repository.query_by_landlord(landlord_id)
            invitations = reduce_invitations(events, now)
            logfire.info(
                "Invitations derived",
                landlord_id=str(landlord_id),
                event_count=len(events),
                invitation_count=len(invitations),
            )
            return invitations

    async def suspensions_for(
        self, invitations: list[DerivedInvitation], now: datetime
    ) -> dict[AgentId, SuspensionView]:
        """Current suspensions of the approved agents among `invitations`.

        Args:
            invitations: Derived invitations, typically one landlord's roster
            now: Instant used for the expiry flag and countdown

        Returns:
            Suspension views keyed by agent, suspended agents only
        """
        suspensions: dict[AgentId, SuspensionView] = {}
        for invitation in invitations:
            if (
                invitation.status != InvitationStatus.APPROVED
                or invitation.agent_id is None
            ):
                continue
            view = await self.suspension_service.current_suspension(
                invitation.agent_id, now
            )
            if view is not None:
                suspensions[invitation.agent_id] = view
        return suspensions

    async def find_invitation_for_agent(
        self, landlord_id: LandlordId, agent_id: AgentId, now: datetime
    ) -> DerivedInvitation | None:
        """The landlord's invitation that produced an agent.

        Args:
            landlord_id: The landlord
            agent_id: The agent
            now: Instant at which expiry is evaluated

        Returns:
            The invitation, None if the agent did not come from this landlord
        """
        invitations = await self.list_invitations_for_landlord(landlord_id, now)
        return next((inv for inv in invitations if inv.agent_id == agent_id), None)

    async def get_agent_lifecycle(
        self, agent_id: AgentId, now: datetime
    ) -> AgentLifecycle:
        """Approval and suspension state of an agent.

        Args:
            agent_id: The agent
            now: Instant at which expiry and suspension windows are evaluated

        Returns:
            The agent's lifecycle

        Raises:
            NotFoundError: If no invitation references the agent
        """
        with logfire.span(
            "lifecycle_service.get_agent_lifecycle", agent_id=str(agent_id)
        ):
            agent_events = await self.event_repository.query_by_agent(agent_id)
            if not agent_events:
                logfire.warn("No invitation references agent", agent_id=str(agent_id))
                raise NotFoundError("Agent", str(agent_id))

            approved = False
            for email in sorted({event.email for event in agent_events}):
                events = await self.event_repository.query_by_email(email)
                for invitation in reduce_invitations(events, now):
                    if (
                        invitation.agent_id == agent_id
                        and invitation.status == InvitationStatus.APPROVED
                    ):
                        approved = True

            suspension = await self.suspension_service.current_suspension(
                agent_id, now
            )
            lifecycle = AgentLifecycle(
                agent_id=agent_id, approved=approved, suspension=suspension
            )
            logfire.info(
                "Agent lifecycle derived",
                agent_id=str(agent_id),
                standing=lifecycle.standing.value,
            )
            return lifecycle

    async def require_approved_agent(
        self, landlord_id: LandlordId, agent_id: AgentId, now: datetime
    ) -> DerivedInvitation:
        """The landlord's approved invitation for an agent.

        Args:
            landlord_id: The landlord
            agent_id: The agent
            now: Instant at which expiry is evaluated

        Returns:
            The approved invitation

        Raises:
            NotFoundError: If the agent is not an approved agent of the landlord
        """
        invitation = await self.find_invitation_for_agent(landlord_id, agent_id, now)
        if invitation is None or invitation.status != InvitationStatus.APPROVED:
            logfire.warn(
                "Agent is not approved under landlord",
                landlord_id=str(landlord_id),
                agent_id=str(agent_id),
            )
            raise NotFoundError("Approved agent", str(agent_id))
        return invitation
