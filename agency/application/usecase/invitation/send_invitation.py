"""Send invitation use case."""

import secrets
from datetime import datetime, timedelta
from urllib.parse import urlencode
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from agency.application.usecase.base import BaseUseCase
from agency.config import InvitationSettings
from agency.domain.error import ConflictError
from agency.domain.repository import UserDirectory
from agency.domain.service import Clock, InvitationService
from agency.domain.value import InviteToken, LandlordId, normalize_email


class SendInvitationRequest(BaseModel):
    """Request to invite a worker to become an agent."""

    landlord_id: UUID
    email: str = Field(min_length=3, max_length=255)
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=50)


class SendInvitationResponse(BaseModel):
    """Response after sending an invitation."""

    email: str
    token: str
    expires_at: datetime
    invitation_url: str


class SendInvitationUseCase(BaseUseCase):
    """Use case for sending (or re-sending) an agent invitation."""

    def __init__(
        self,
        invitation_service: InvitationService,
        user_directory: UserDirectory,
        clock: Clock,
        settings: InvitationSettings,
        frontend_url: str,
    ) -> None:
        """Initialize use case.

        Args:
            invitation_service: Invitation domain service
            user_directory: Existing users, to refuse inviting a taken email
            clock: Source of the current time
            settings: Token, expiry and link configuration
            frontend_url: Base URL of the frontend that redeems invitations
        """
        self.invitation_service = invitation_service
        self.user_directory = user_directory
        self.clock = clock
        self.settings = settings
        self.frontend_url = frontend_url

    async def execute(self, request: SendInvitationRequest) -> SendInvitationResponse:
        """Append a SENT event with a fresh token.

        A repeat invite for the same email refreshes the token and expiry of
        the existing invitation rather than starting a new one.

        Args:
            request: Send invitation request

        Returns:
            Token, expiry and the registration link to send to the invitee

        Raises:
            InvalidEmailError: If the email cannot be normalized
            ConflictError: If a user already owns the email
        """
        landlord_id = LandlordId(request.landlord_id)
        email = normalize_email(request.email)

        with logfire.span(
            "send_invitation", landlord_id=str(landlord_id), email=email
        ):
            if await self.user_directory.email_exists(email):
                logfire.warn(
                    "Invite refused, user already exists",
                    landlord_id=str(landlord_id),
                    email=email,
                )
                raise ConflictError(f"A user with email {email} already exists")

            now = self.clock.now()
            token = InviteToken(secrets.token_hex(self.settings.token_bytes))
            event = await self.invitation_service.record_sent(
                landlord_id=landlord_id,
                email=email,
                token=token,
                issued_at=now,
                expires_at=now + timedelta(days=self.settings.expiry_days),
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
            )

            query = urlencode({"token": token.root, "email": event.email})
            invitation_url = (
                f"{self.frontend_url}{self.settings.registration_path}?{query}"
            )

            return SendInvitationResponse(
                email=event.email,
                token=token.root,
                expires_at=event.expires_at,
                invitation_url=invitation_url,
            )
