"""Landlord routes: invitations, approval and suspension of agents."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel, Field

from agency.application.usecase.invitation import (
    ApproveAgentRequest,
    ApproveAgentResponse,
    ApproveAgentUseCase,
    GetInvitationsRequest,
    GetInvitationsResponse,
    GetInvitationsUseCase,
    SendInvitationRequest,
    SendInvitationResponse,
    SendInvitationUseCase,
)
from agency.application.usecase.suspension import (
    SuspendAgentRequest,
    SuspendAgentUseCase,
    SuspensionItem,
    UnsuspendAgentRequest,
    UnsuspendAgentUseCase,
)
from agency.domain.error import DomainError
from agency.domain.value import SuspensionReason
from agency.interface.error import to_http_exception

router = APIRouter(
    prefix="/landlords/{landlord_id}", tags=["landlords"], route_class=DishkaRoute
)


class SendInvitationAPIRequest(BaseModel):
    """API request for inviting an agent."""

    email: str
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    phone: str | None = None


class SuspendAgentAPIRequest(BaseModel):
    """API request for suspending an agent."""

    reason_code: SuspensionReason
    reason_text: str | None = None
    notes: str | None = None
    duration_days: int


@router.post(
    "/invitations",
    response_model=SendInvitationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_invitation(
    landlord_id: UUID,
    request: SendInvitationAPIRequest,
    send_invitation_use_case: FromDishka[SendInvitationUseCase],
) -> SendInvitationResponse:
    """Invite a worker by email, or re-send an existing invitation.

    Args:
        landlord_id: Inviting landlord
        request: Invitee details
        send_invitation_use_case: Send invitation use case from DI

    Returns:
        Token, expiry and registration link

    Raises:
        HTTPException: If the email is invalid or already has an account
    """
    try:
        return await send_invitation_use_case.execute(
            SendInvitationRequest(
                landlord_id=landlord_id,
                email=request.email,
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/invitations", response_model=GetInvitationsResponse)
async def get_invitations(
    landlord_id: UUID,
    get_invitations_use_case: FromDishka[GetInvitationsUseCase],
) -> GetInvitationsResponse:
    """List the landlord's invitations, most recently active first."""
    return await get_invitations_use_case.execute(
        GetInvitationsRequest(landlord_id=landlord_id)
    )


@router.post("/agents/{agent_id}/approve", response_model=ApproveAgentResponse)
async def approve_agent(
    landlord_id: UUID,
    agent_id: UUID,
    approve_agent_use_case: FromDishka[ApproveAgentUseCase],
) -> ApproveAgentResponse:
    """Approve an agent who registered from one of the landlord's invitations.

    Raises:
        HTTPException: 404 if no invitation is awaiting approval for the agent
    """
    try:
        return await approve_agent_use_case.execute(
            ApproveAgentRequest(landlord_id=landlord_id, agent_id=agent_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/agents/{agent_id}/suspend",
    response_model=SuspensionItem,
    status_code=status.HTTP_201_CREATED,
)
async def suspend_agent(
    landlord_id: UUID,
    agent_id: UUID,
    request: SuspendAgentAPIRequest,
    suspend_agent_use_case: FromDishka[SuspendAgentUseCase],
) -> SuspensionItem:
    """Suspend an approved agent, replacing any current suspension.

    Raises:
        HTTPException: 404 if the agent is not approved under the landlord,
            400 if the duration or reason is invalid
    """
    try:
        return await suspend_agent_use_case.execute(
            SuspendAgentRequest(
                landlord_id=landlord_id,
                agent_id=agent_id,
                reason_code=request.reason_code,
                reason_text=request.reason_text,
                notes=request.notes,
                duration_days=request.duration_days,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/agents/{agent_id}/unsuspend",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def unsuspend_agent(
    landlord_id: UUID,
    agent_id: UUID,
    unsuspend_agent_use_case: FromDishka[UnsuspendAgentUseCase],
) -> Response:
    """Lift an agent's suspension. Succeeds even if the agent is not suspended."""
    try:
        await unsuspend_agent_use_case.execute(
            UnsuspendAgentRequest(landlord_id=landlord_id, agent_id=agent_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
