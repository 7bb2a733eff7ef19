"""PostgreSQL implementation of Suspension repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from agency.domain.model import SuspensionRecord
from agency.domain.repository import SuspensionRepository
from agency.domain.value import AgentId
from agency.persistence.mappers import row_to_suspension, suspension_to_dict
from agency.persistence.tables import agent_suspensions_table


class PostgresSuspensionRepository(SuspensionRepository):
    """PostgreSQL implementation of SuspensionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def replace(self, record: SuspensionRecord) -> SuspensionRecord:
        """Upsert the agent's suspension row.

        Args:
            record: The new suspension

        Returns:
            The stored record
        """
        values = suspension_to_dict(record)
        stmt = insert(agent_suspensions_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[agent_suspensions_table.c.agent_id],
            set_={k: v for k, v in values.items() if k != "agent_id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return record

    async def delete(self, agent_id: AgentId) -> bool:
        """Delete the agent's suspension row.

        Args:
            agent_id: The agent

        Returns:
            True if a row was deleted
        """
        stmt = (
            delete(agent_suspensions_table)
            .where(agent_suspensions_table.c.agent_id == agent_id)
            .returning(agent_suspensions_table.c.agent_id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_agent(self, agent_id: AgentId) -> Optional[SuspensionRecord]:
        """Find the agent's suspension.

        Args:
            agent_id: The agent

        Returns:
            The record if found, None otherwise
        """
        stmt = select(agent_suspensions_table).where(
            agent_suspensions_table.c.agent_id == agent_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_suspension(dict(row)) if row else None
