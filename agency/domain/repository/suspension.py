"""Suspension repository interface."""

from abc import ABC, abstractmethod

from agency.domain.model import SuspensionRecord
from agency.domain.value import AgentId


class SuspensionRepository(ABC):
    """Store of at most one suspension record per agent."""

    @abstractmethod
    async def replace(self, record: SuspensionRecord) -> SuspensionRecord:
        """Write a record, replacing any existing record for the agent.

        Writes for the same agent are serialized; the last committed write
        wins.

        Args:
            record: The new suspension

        Returns:
            The stored record
        """
        pass

    @abstractmethod
    async def delete(self, agent_id: AgentId) -> bool:
        """Delete the agent's record if present.

        Args:
            agent_id: The agent

        Returns:
            True if a record was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_agent(self, agent_id: AgentId) -> SuspensionRecord | None:
        """Find the agent's record.

        Args:
            agent_id: The agent

        Returns:
            The record if found, None otherwise
        """
        pass
