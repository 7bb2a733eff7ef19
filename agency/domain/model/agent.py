"""Agent lifecycle view used by the agent dashboard."""

from agency.domain.model.common import DomainModel
from agency.domain.model.suspension import SuspensionView
from agency.domain.value import AgentId, AgentStanding


class AgentLifecycle(DomainModel):
    """Approval and suspension state of one agent."""

    agent_id: AgentId
    approved: bool
    suspension: SuspensionView | None = None

    @property
    def standing(self) -> AgentStanding:
        """Dashboard mode: pending approval, suspended (view-only) or full access."""
        if not self.approved:
            return AgentStanding.PENDING_APPROVAL
        if self.suspension is not None:
            return AgentStanding.SUSPENDED
        return AgentStanding.ACTIVE
