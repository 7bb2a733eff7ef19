"""Unit tests for RecordAccountCreatedUseCase."""

from datetime import timedelta
from uuid import uuid4

from dishka import AsyncContainer
import pytest

from agency.application.usecase.invitation.record_account_created import (
    RecordAccountCreatedRequest,
    RecordAccountCreatedUseCase,
)
from agency.domain.error import ConflictError, NotFoundError
from agency.domain.repository import InvitationEventRepository
from agency.domain.service import FixedClock, InvitationService, LifecycleService
from agency.domain.value import AgentStanding, InvitationStatus
from tests.factories import T0, account_created, approved, sent
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _use_case(
    env: AsyncContainer, clock: FixedClock
) -> RecordAccountCreatedUseCase:
    return RecordAccountCreatedUseCase(
        invitation_service=await env.get(InvitationService),
        clock=clock,
    )


def _request(email: str = "worker@example.com") -> RecordAccountCreatedRequest:
    return RecordAccountCreatedRequest(
        email=email, agent_id=uuid4(), agent_user_id=uuid4()
    )


class TestRecordAccountCreatedUseCase:
    """Tests for RecordAccountCreatedUseCase."""

    @pytest.mark.asyncio
    async def test_links_account_to_invitation(self, unit_env, landlord_id):
        # Arrange
        repo = await unit_env.get(InvitationEventRepository)
        await repo.append(sent("worker@example.com", landlord_id))
        clock = FixedClock(T0 + timedelta(hours=3))
        use_case = await _use_case(unit_env, clock)
        request = _request("Worker@Example.com")

        # Act
        await use_case.execute(request)

        # Assert
        lifecycle = await unit_env.get(LifecycleService)
        [invitation] = await lifecycle.list_invitations_for_landlord(
            landlord_id, clock.now()
        )
        assert invitation.status == InvitationStatus.PENDING_APPROVAL
        assert invitation.agent_id == request.agent_id
        assert invitation.account_created_at == clock.now()

    @pytest.mark.asyncio
    async def test_approved_agent_keeps_standing(self, unit_env, landlord_id, agent_id):
        """A late duplicate notification cannot take over an approved invitation."""
        # Arrange
        repo = await unit_env.get(InvitationEventRepository)
        await repo.append(sent("worker@example.com", landlord_id))
        await repo.append(
            account_created(
                "worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=1)
            )
        )
        await repo.append(
            approved("worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=2))
        )
        clock = FixedClock(T0 + timedelta(days=1))
        use_case = await _use_case(unit_env, clock)

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(_request())

        lifecycle = await unit_env.get(LifecycleService)
        standing = await lifecycle.get_agent_lifecycle(agent_id, clock.now())
        assert standing.standing == AgentStanding.ACTIVE
        [invitation] = await lifecycle.list_invitations_for_landlord(
            landlord_id, clock.now()
        )
        assert invitation.agent_id == agent_id
        assert invitation.account_created_at == T0 + timedelta(hours=1)

    @pytest.mark.asyncio
    async def test_uninvited_email(self, unit_env):
        use_case = await _use_case(unit_env, FixedClock(T0))

        with pytest.raises(NotFoundError):
            await use_case.execute(_request("stranger@example.com"))
