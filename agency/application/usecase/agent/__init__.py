"""Agent use cases."""

from agency.application.usecase.agent.get_agent_status import (
    GetAgentStatusRequest,
    GetAgentStatusResponse,
    GetAgentStatusUseCase,
)

__all__ = [
    "GetAgentStatusRequest",
    "GetAgentStatusResponse",
    "GetAgentStatusUseCase",
]
