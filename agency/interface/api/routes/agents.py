"""Agent routes: registration and dashboard status."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from agency.application.usecase.agent import (
    GetAgentStatusRequest,
    GetAgentStatusResponse,
    GetAgentStatusUseCase,
)
from agency.application.usecase.registration import (
    RegisterAgentRequest,
    RegisterAgentResponse,
    RegisterAgentUseCase,
)
from agency.domain.error import DomainError
from agency.interface.error import to_http_exception

router = APIRouter(prefix="/agents", tags=["agents"], route_class=DishkaRoute)


@router.post(
    "/register",
    response_model=RegisterAgentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_agent(
    request: RegisterAgentRequest,
    register_agent_use_case: FromDishka[RegisterAgentUseCase],
) -> RegisterAgentResponse:
    """Redeem an invitation token and create the agent account.

    Args:
        request: Registration form
        register_agent_use_case: Register agent use case from DI

    Returns:
        The new agent, pending landlord approval

    Raises:
        HTTPException: If the token cannot be redeemed or the email is taken
    """
    try:
        return await register_agent_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{agent_id}/status", response_model=GetAgentStatusResponse)
async def get_agent_status(
    agent_id: UUID,
    get_agent_status_use_case: FromDishka[GetAgentStatusUseCase],
) -> GetAgentStatusResponse:
    """Approval and suspension state for the agent dashboard."""
    try:
        return await get_agent_status_use_case.execute(
            GetAgentStatusRequest(agent_id=agent_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
