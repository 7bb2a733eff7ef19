"""Unit tests for suspension use cases."""

from datetime import timedelta
from uuid import uuid4

from dishka import AsyncContainer
import pytest

from agency.application.usecase.suspension import (
    SuspendAgentRequest,
    SuspendAgentUseCase,
    UnsuspendAgentRequest,
    UnsuspendAgentUseCase,
)
from agency.domain.error import NotFoundError, ValidationError
from agency.domain.repository import InvitationEventRepository
from agency.domain.service import FixedClock, LifecycleService, SuspensionService
from agency.domain.value import SuspensionReason
from tests.factories import T0, account_created, approved, sent
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

NOW = T0 + timedelta(days=3)


async def _approved_agent(env: AsyncContainer, landlord_id, agent_id) -> None:
    repo = await env.get(InvitationEventRepository)
    await repo.append(sent("worker@example.com", landlord_id))
    await repo.append(
        account_created(
            "worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=1)
        )
    )
    await repo.append(
        approved("worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=2))
    )


async def _suspend_use_case(env: AsyncContainer) -> SuspendAgentUseCase:
    return SuspendAgentUseCase(
        suspension_service=await env.get(SuspensionService),
        lifecycle_service=await env.get(LifecycleService),
        clock=FixedClock(NOW),
    )


async def _unsuspend_use_case(env: AsyncContainer) -> UnsuspendAgentUseCase:
    return UnsuspendAgentUseCase(
        suspension_service=await env.get(SuspensionService),
        lifecycle_service=await env.get(LifecycleService),
        clock=FixedClock(NOW),
    )


class TestSuspendAgentUseCase:
    """Tests for SuspendAgentUseCase."""

    @pytest.mark.asyncio
    async def test_suspends_approved_agent(self, unit_env, landlord_id, agent_id):
        # Arrange
        await _approved_agent(unit_env, landlord_id, agent_id)
        use_case = await _suspend_use_case(unit_env)

        # Act
        item = await use_case.execute(
            SuspendAgentRequest(
                landlord_id=landlord_id,
                agent_id=agent_id,
                reason_code=SuspensionReason.VIOLATION_OF_TERMS,
                notes="Please contact the office",
                duration_days=14,
            )
        )

        # Assert
        assert item.started_at == NOW
        assert item.ends_at == NOW + timedelta(days=14)
        assert item.days_remaining == 14
        assert item.is_expired_by_time is False
        assert item.reason_label == "Violation of Terms"

    @pytest.mark.asyncio
    async def test_other_reason_needs_text(self, unit_env, landlord_id, agent_id):
        # Arrange
        await _approved_agent(unit_env, landlord_id, agent_id)
        use_case = await _suspend_use_case(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                SuspendAgentRequest(
                    landlord_id=landlord_id,
                    agent_id=agent_id,
                    reason_code=SuspensionReason.OTHER,
                    duration_days=3,
                )
            )

    @pytest.mark.asyncio
    async def test_unapproved_agent(self, unit_env, landlord_id, agent_id):
        """Agents still waiting on approval cannot be suspended."""
        # Arrange
        repo = await unit_env.get(InvitationEventRepository)
        await repo.append(sent("worker@example.com", landlord_id))
        await repo.append(
            account_created(
                "worker@example.com", landlord_id, agent_id, T0 + timedelta(hours=1)
            )
        )
        use_case = await _suspend_use_case(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                SuspendAgentRequest(
                    landlord_id=landlord_id,
                    agent_id=agent_id,
                    reason_code=SuspensionReason.POOR_PERFORMANCE,
                    duration_days=3,
                )
            )


class TestUnsuspendAgentUseCase:
    """Tests for UnsuspendAgentUseCase."""

    @pytest.mark.asyncio
    async def test_lifts_suspension(self, unit_env, landlord_id, agent_id):
        # Arrange
        await _approved_agent(unit_env, landlord_id, agent_id)
        suspend = await _suspend_use_case(unit_env)
        await suspend.execute(
            SuspendAgentRequest(
                landlord_id=landlord_id,
                agent_id=agent_id,
                reason_code=SuspensionReason.MUTUAL_AGREEMENT,
                duration_days=2,
            )
        )
        use_case = await _unsuspend_use_case(unit_env)
        request = UnsuspendAgentRequest(landlord_id=landlord_id, agent_id=agent_id)

        # Act & Assert
        assert await use_case.execute(request) is True
        assert await use_case.execute(request) is False

    @pytest.mark.asyncio
    async def test_unknown_agent(self, unit_env, landlord_id):
        use_case = await _unsuspend_use_case(unit_env)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UnsuspendAgentRequest(landlord_id=landlord_id, agent_id=uuid4())
            )
