"""Registration use cases."""

from agency.application.usecase.registration.register_agent import (
    RegisterAgentRequest,
    RegisterAgentResponse,
    RegisterAgentUseCase,
)

__all__ = [
    "RegisterAgentRequest",
    "RegisterAgentResponse",
    "RegisterAgentUseCase",
]
