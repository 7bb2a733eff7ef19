"""In-memory suspension repository for testing."""

import asyncio

from agency.domain.model import SuspensionRecord
from agency.domain.repository import SuspensionRepository
from agency.domain.value import AgentId


class InMemorySuspensionRepository(SuspensionRepository):
    """In-memory implementation of SuspensionRepository for testing."""

    def __init__(self) -> None:
        self._records: dict[AgentId, SuspensionRecord] = {}
        self._lock = asyncio.Lock()

    async def replace(self, record: SuspensionRecord) -> SuspensionRecord:
        """Store a suspension, discarding any previous one for the agent."""
        async with self._lock:
            self._records[record.agent_id] = record
            return record

    async def delete(self, agent_id: AgentId) -> bool:
        """Remove an agent's suspension."""
        async with self._lock:
            return self._records.pop(agent_id, None) is not None

    async def find_by_agent(self, agent_id: AgentId) -> SuspensionRecord | None:
        """Current suspension of an agent."""
        return self._records.get(agent_id)
