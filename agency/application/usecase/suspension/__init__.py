"""Suspension use cases."""

from agency.application.usecase.suspension.suspend_agent import (
    SuspendAgentRequest,
    SuspendAgentUseCase,
    SuspensionItem,
)
from agency.application.usecase.suspension.unsuspend_agent import (
    UnsuspendAgentRequest,
    UnsuspendAgentUseCase,
)

__all__ = [
    "SuspendAgentRequest",
    "SuspendAgentUseCase",
    "SuspensionItem",
    "UnsuspendAgentRequest",
    "UnsuspendAgentUseCase",
]
