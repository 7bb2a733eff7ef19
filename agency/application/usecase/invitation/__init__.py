"""Invitation use cases."""

from agency.application.usecase.invitation.approve_agent import (
    ApproveAgentRequest,
    ApproveAgentResponse,
    ApproveAgentUseCase,
)
from agency.application.usecase.invitation.get_invitations import (
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
    InvitationItem,
)
from agency.application.usecase.invitation.record_account_created import (
    RecordAccountCreatedRequest,
    RecordAccountCreatedUseCase,
)
from agency.application.usecase.invitation.send_invitation import (
    SendInvitationRequest,
    SendInvitationResponse,
    SendInvitationUseCase,
)
from agency.application.usecase.invitation.verify_invitation import (
    VerifyInvitationRequest,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)

__all__ = [
    "ApproveAgentRequest",
    "ApproveAgentResponse",
    "ApproveAgentUseCase",
    "GetInvitationsRequest",
    "GetInvitationsResponse",
    "GetInvitationsUseCase",
    "InvitationItem",
    "RecordAccountCreatedRequest",
    "RecordAccountCreatedUseCase",
    "SendInvitationRequest",
    "SendInvitationResponse",
    "SendInvitationUseCase",
    "VerifyInvitationRequest",
    "VerifyInvitationResponse",
    "VerifyInvitationUseCase",
]
