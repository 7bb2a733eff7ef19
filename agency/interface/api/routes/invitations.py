"""Invitation routes used by the registration flow."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response, status

from agency.application.usecase.invitation import (
    RecordAccountCreatedRequest,
    RecordAccountCreatedUseCase,
    VerifyInvitationRequest,
    VerifyInvitationResponse,
    VerifyInvitationUseCase,
)
from agency.domain.error import DomainError
from agency.interface.error import to_http_exception

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.get("/verify", response_model=VerifyInvitationResponse)
async def verify_invitation(
    verify_invitation_use_case: FromDishka[VerifyInvitationUseCase],
    token: str = Query(min_length=1, max_length=255),
    email: str | None = Query(default=None),
) -> VerifyInvitationResponse:
    """Check an invitation link and return the profile to pre-fill.

    Args:
        verify_invitation_use_case: Verify invitation use case from DI
        token: Token from the invitation link
        email: Email from the invitation link, if present

    Returns:
        Invitation profile

    Raises:
        HTTPException: 404 for unknown tokens, 410 for expired or used
            tokens, 400 for an email mismatch
    """
    try:
        return await verify_invitation_use_case.execute(
            VerifyInvitationRequest(token=token, email=email)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/account-created",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def account_created(
    request: RecordAccountCreatedRequest,
    record_account_created_use_case: FromDishka[RecordAccountCreatedUseCase],
) -> Response:
    """Record that an agent account was created for an invited email.

    Called by the user directory after the user row is durably written.
    """
    try:
        await record_account_created_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
