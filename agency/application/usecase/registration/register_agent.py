"""Register agent use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from agency.application.usecase.base import BaseUseCase
from agency.domain.error import ConflictError
from agency.domain.repository import UserDirectory
from agency.domain.service import Clock, InvitationService, TokenVerifier
from agency.domain.value import (
    AgentProfile,
    InvitationStatus,
    InviteToken,
    UserRole,
)


class RegisterAgentRequest(BaseModel):
    """Registration form submitted from an invitation link."""

    token: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    first_name: str | None = Field(default=None, max_length=255)
    last_name: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=50)


class RegisterAgentResponse(BaseModel):
    """Response after registering an agent."""

    agent_id: UUID
    user_id: UUID
    landlord_id: UUID
    email: str
    status: InvitationStatus


class RegisterAgentUseCase(BaseUseCase):
    """Use case for redeeming an invitation token into an agent account.

    The user and agent rows are written first; ACCOUNT_CREATED is appended
    only once they exist, so the log never points at a missing agent.
    """

    def __init__(
        self,
        token_verifier: TokenVerifier,
        invitation_service: InvitationService,
        user_directory: UserDirectory,
        clock: Clock,
    ) -> None:
        """Initialize use case.

        Args:
            token_verifier: Token verifier domain service
            invitation_service: Invitation domain service
            user_directory: Where user and agent rows are created
            clock: Source of the current time
        """
        self.token_verifier = token_verifier
        self.invitation_service = invitation_service
        self.user_directory = user_directory
        self.clock = clock

    async def execute(self, request: RegisterAgentRequest) -> RegisterAgentResponse:
        """Execute register agent use case.

        Args:
            request: Register agent request

        Returns:
            The new agent, awaiting landlord approval

        Raises:
            TokenNotFoundError: If the token was never issued
            TokenRejectedError: If the token cannot be redeemed
            ConflictError: If a user already owns the email
        """
        token = InviteToken(request.token)
        now = self.clock.now()

        with logfire.span("register_agent", token=token.prefix):
            invitation = await self.token_verifier.verify(
                token, now, email_hint=request.email
            )

            if await self.user_directory.email_exists(invitation.email):
                logfire.warn(
                    "Registration refused, user already exists",
                    email=invitation.email,
                )
                raise ConflictError(
                    f"A user with email {invitation.email} already exists"
                )

            profile = AgentProfile(
                email=invitation.email,
                first_name=request.first_name or invitation.first_name,
                last_name=request.last_name or invitation.last_name,
                phone=request.phone or invitation.phone,
            )
            user_id = await self.user_directory.create_user(profile, UserRole.AGENT)
            agent_id = await self.user_directory.create_agent_profile(user_id)

            await self.invitation_service.record_account_created(
                email=invitation.email,
                agent_id=agent_id,
                agent_user_id=user_id,
                issued_at=now,
                landlord_id=invitation.landlord_id,
                phone=request.phone,
            )

            logfire.info(
                "Agent registered",
                agent_id=str(agent_id),
                landlord_id=str(invitation.landlord_id),
            )
            return RegisterAgentResponse(
                agent_id=agent_id,
                user_id=user_id,
                landlord_id=invitation.landlord_id,
                email=invitation.email,
                status=InvitationStatus.PENDING_APPROVAL,
            )
