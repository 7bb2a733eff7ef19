"""Verify invitation use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from agency.application.usecase.base import BaseUseCase
from agency.domain.service import Clock, TokenVerifier
from agency.domain.value import InviteToken


class VerifyInvitationRequest(BaseModel):
    """Request to verify an invitation token."""

    token: str = Field(min_length=1, max_length=255)
    email: str | None = None


class VerifyInvitationResponse(BaseModel):
    """Profile used to pre-fill the agent registration form."""

    email: str
    first_name: str | None
    last_name: str | None
    phone: str | None
    landlord_id: str
    expires_at: datetime


class VerifyInvitationUseCase(BaseUseCase):
    """Use case for checking an invitation link before registration."""

    def __init__(self, token_verifier: TokenVerifier, clock: Clock) -> None:
        """Initialize use case.

        Args:
            token_verifier: Token verifier domain service
            clock: Source of the current time
        """
        self.token_verifier = token_verifier
        self.clock = clock

    async def execute(
        self, request: VerifyInvitationRequest
    ) -> VerifyInvitationResponse:
        """Execute verify invitation use case.

        Args:
            request: Verify invitation request

        Returns:
            Profile snapshot of the invitation

        Raises:
            TokenNotFoundError: If the token was never issued
            TokenRejectedError: If the token cannot be redeemed
        """
        result = await self.token_verifier.verify(
            InviteToken(request.token), self.clock.now(), email_hint=request.email
        )
        return VerifyInvitationResponse(
            email=result.email,
            first_name=result.first_name,
            last_name=result.last_name,
            phone=result.phone,
            landlord_id=str(result.landlord_id),
            expires_at=result.expires_at,
        )
