"""PostgreSQL implementation of the invitation event log."""

from collections.abc import Sequence

from sqlalchemy import and_, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agency.domain.error import ConflictError
from agency.domain.model import InvitationEvent, InvitationSent
from agency.domain.repository import InvitationEventRepository
from agency.domain.value import (
    AgentId,
    EventId,
    InvitationEventKind,
    InviteToken,
    LandlordId,
)
from agency.persistence.mappers import event_to_dict, row_to_event, row_to_sent
from agency.persistence.tables import invitation_events_table

_events = invitation_events_table
_LOG_ORDER = (_events.c.issued_at.asc(), _events.c.sequence.asc())


class PostgresInvitationEventRepository(InvitationEventRepository):
    """PostgreSQL implementation of InvitationEventRepository.

    Sequence numbers come from an identity column. Token uniqueness among
    live invitations is checked under a transaction-scoped advisory lock
    keyed on the token, so two appends of the same token serialize.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _check_live_token(self, event: InvitationSent) -> None:
        await self.session.execute(
            select(func.pg_advisory_xact_lock(func.hashtext(event.token.root)))
        )
        stmt = select(_events.c.id).where(
            and_(
                _events.c.kind == InvitationEventKind.SENT.value,
                _events.c.token == event.token.root,
                _events.c.expires_at >= event.issued_at,
            )
        )
        result = await self.session.execute(stmt)
        if result.first() is not None:
            raise ConflictError(
                "Invitation token is already in use by a live invitation"
            )

    async def append(self, event: InvitationEvent) -> EventId:
        """Append an event to the log.

        Args:
            event: The event to append

        Returns:
            The event's ID

        Raises:
            ConflictError: If the id exists or a SENT reuses a live token
        """
        if isinstance(event, InvitationSent):
            await self._check_live_token(event)

        stmt = insert(_events).values(**event_to_dict(event))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(f"Event {event.id} could not be recorded") from e

        return event.id

    async def _query(self, *criteria) -> list[InvitationEvent]:
        stmt = select(_events).where(*criteria).order_by(*_LOG_ORDER)
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings().all()]

    async def query_by_landlord(
        self, landlord_id: LandlordId
    ) -> Sequence[InvitationEvent]:
        """All events owned by a landlord.

        Args:
            landlord_id: The owning landlord

        Returns:
            Events in log order
        """
        return await self._query(_events.c.landlord_id == landlord_id)

    async def query_by_email(self, email: str) -> Sequence[InvitationEvent]:
        """All events for a normalized email.

        Args:
            email: Normalized email

        Returns:
            Events in log order
        """
        return await self._query(_events.c.email == email)

    async def query_by_agent(self, agent_id: AgentId) -> Sequence[InvitationEvent]:
        """Events that reference an agent.

        Args:
            agent_id: The agent

        Returns:
            Events in log order
        """
        return await self._query(_events.c.agent_id == agent_id)

    async def find_sent_by_token(self, token: InviteToken) -> InvitationSent | None:
        """Find the latest SENT event carrying a token.

        Args:
            token: The invitation token

        Returns:
            The SENT event if found, None otherwise
        """
        stmt = (
            select(_events)
            .where(
                and_(
                    _events.c.kind == InvitationEventKind.SENT.value,
                    _events.c.token == token.root,
                )
            )
            .order_by(_events.c.issued_at.desc(), _events.c.sequence.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None
        return row_to_sent(dict(row))
