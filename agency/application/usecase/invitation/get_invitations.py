"""Get invitations use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agency.application.usecase.base import BaseUseCase
from agency.application.usecase.suspension import SuspensionItem
from agency.domain.model import DerivedInvitation, SuspensionView
from agency.domain.service import Clock, LifecycleService
from agency.domain.value import InvitationStatus, LandlordId


class GetInvitationsRequest(BaseModel):
    """Request for a landlord's invitations."""

    landlord_id: UUID


class InvitationItem(BaseModel):
    """Invitation item in response."""

    email: str
    first_name: str | None
    last_name: str | None
    phone: str | None
    status: InvitationStatus
    agent_id: str | None
    sent_at: datetime
    expires_at: datetime
    account_created_at: datetime | None
    approved_at: datetime | None
    last_activity_at: datetime
    suspension: SuspensionItem | None = None

    @classmethod
    def from_invitation(
        cls, invitation: DerivedInvitation, suspension: SuspensionView | None = None
    ) -> "InvitationItem":
        return cls(
            email=invitation.email,
            first_name=invitation.first_name,
            last_name=invitation.last_name,
            phone=invitation.phone,
            status=invitation.status,
            agent_id=str(invitation.agent_id) if invitation.agent_id else None,
            sent_at=invitation.sent_at,
            expires_at=invitation.expires_at,
            account_created_at=invitation.account_created_at,
            approved_at=invitation.approved_at,
            last_activity_at=invitation.last_activity_at,
            suspension=SuspensionItem.from_view(suspension) if suspension else None,
        )


class GetInvitationsResponse(BaseModel):
    """Response with a landlord's invitations."""

    invitations: list[InvitationItem]


class GetInvitationsUseCase(BaseUseCase):
    """Use case for listing a landlord's invitations with derived status."""

    def __init__(self, lifecycle_service: LifecycleService, clock: Clock) -> None:
        """Initialize use case.

        Args:
            lifecycle_service: Lifecycle query facade
            clock: Source of the current time
        """
        self.lifecycle_service = lifecycle_service
        self.clock = clock

    async def execute(self, request: GetInvitationsRequest) -> GetInvitationsResponse:
        """Execute get invitations use case.

        Args:
            request: Get invitations request

        Returns:
            One item per invited email, approved agents carrying any
            current suspension
        """
        now = self.clock.now()
        invitations = await self.lifecycle_service.list_invitations_for_landlord(
            LandlordId(request.landlord_id), now
        )
        suspensions = await self.lifecycle_service.suspensions_for(invitations, now)
        return GetInvitationsResponse(
            invitations=[
                InvitationItem.from_invitation(
                    inv, suspensions.get(inv.agent_id) if inv.agent_id else None
                )
                for inv in invitations
            ]
        )
