"""Unit tests for GetAgentStatusUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agency.application.usecase.agent.get_agent_status import (
    GetAgentStatusRequest,
    GetAgentStatusUseCase,
)
from agency.domain.error import NotFoundError
from agency.domain.repository import InvitationEventRepository
from agency.domain.service import FixedClock, LifecycleService, SuspensionService
from agency.domain.value import AgentStanding, SuspensionReason
from tests.factories import T0, account_created, approved, sent
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetAgentStatusUseCase:
    """Tests for GetAgentStatusUseCase."""

    @pytest.mark.asyncio
    async def test_suspension_outlives_its_window(self, unit_env, landlord_id, agent_id):
        """A lapsed suspension is flagged but still blocks the agent."""
        # Arrange
        repo = await unit_env.get(InvitationEventRepository)
        suspensions = await unit_env.get(SuspensionService)
        await repo.append(sent("worker@example.com", landlord_id))
        await repo.append(
            account_created(
                "worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=1)
            )
        )
        await repo.append(
            approved("worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=2))
        )
        await suspensions.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.OTHER,
            reason_text="Keys not returned",
            duration_days=1,
            now=T0 + timedelta(days=1),
        )
        use_case = GetAgentStatusUseCase(
            lifecycle_service=await unit_env.get(LifecycleService),
            clock=FixedClock(T0 + timedelta(days=5)),
        )

        # Act
        response = await use_case.execute(GetAgentStatusRequest(agent_id=agent_id))

        # Assert
        assert response.approved is True
        assert response.standing == AgentStanding.SUSPENDED
        assert response.suspension is not None
        assert response.suspension.is_expired_by_time is True
        assert response.suspension.days_remaining == 0
        assert response.suspension.reason_label == "Keys not returned"

    @pytest.mark.asyncio
    async def test_unknown_agent(self, unit_env):
        use_case = GetAgentStatusUseCase(
            lifecycle_service=await unit_env.get(LifecycleService),
            clock=FixedClock(T0),
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(GetAgentStatusRequest(agent_id=uuid4()))
