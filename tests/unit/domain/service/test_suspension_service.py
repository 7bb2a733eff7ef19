"""Unit tests for SuspensionService."""

from datetime import timedelta

import pytest

from agency.config import SuspensionSettings
from agency.domain.error import ValidationError
from agency.domain.repository import SuspensionRepository
from agency.domain.service import SuspensionService
from agency.domain.value import SuspensionReason
from agency.persistence.repository.inmemory import InMemorySuspensionRepository
from tests.factories import T0
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestSuspend:
    """Tests for suspend."""

    @pytest.mark.asyncio
    async def test_suspend_computes_window(self, unit_env, agent_id, landlord_id):
        """ends_at is started_at plus the duration."""
        # Arrange
        service = await unit_env.get(SuspensionService)

        # Act
        record = await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.POOR_PERFORMANCE,
            duration_days=14,
            now=T0,
            notes="Please review the viewing checklist",
        )

        # Assert
        assert record.started_at == T0
        assert record.ends_at == T0 + timedelta(days=14)
        assert record.notes == "Please review the viewing checklist"
        assert record.reason_text is None

    @pytest.mark.asyncio
    async def test_suspend_replaces_previous(self, unit_env, agent_id, landlord_id):
        """At most one suspension exists per agent; the newest wins."""
        # Arrange
        service = await unit_env.get(SuspensionService)
        repo = await unit_env.get(SuspensionRepository)
        await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.POOR_PERFORMANCE,
            duration_days=3,
            now=T0,
        )

        # Act
        await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.BREACH_OF_CONTRACT,
            duration_days=30,
            now=T0 + timedelta(days=1),
        )

        # Assert
        stored = await repo.find_by_agent(agent_id)
        assert stored is not None
        assert stored.reason_code == SuspensionReason.BREACH_OF_CONTRACT
        assert stored.ends_at == T0 + timedelta(days=31)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reason_text", [None, "", "   "])
    async def test_other_requires_text(
        self, unit_env, agent_id, landlord_id, reason_text
    ):
        """OTHER needs a written reason."""
        # Arrange
        service = await unit_env.get(SuspensionService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.suspend(
                agent_id=agent_id,
                landlord_id=landlord_id,
                reason_code=SuspensionReason.OTHER,
                duration_days=7,
                now=T0,
                reason_text=reason_text,
            )

    @pytest.mark.asyncio
    async def test_other_with_text(self, unit_env, agent_id, landlord_id):
        """The written reason is kept, trimmed."""
        # Arrange
        service = await unit_env.get(SuspensionService)

        # Act
        record = await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.OTHER,
            duration_days=7,
            now=T0,
            reason_text="  Keys not returned ",
        )

        # Assert
        assert record.reason_text == "Keys not returned"
        assert record.reason_label == "Keys not returned"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("duration_days", [0, -1])
    async def test_duration_must_be_positive(
        self, unit_env, agent_id, landlord_id, duration_days
    ):
        # Arrange
        service = await unit_env.get(SuspensionService)

        # Act & Assert
        with pytest.raises(ValidationError, match="at least 1 day"):
            await service.suspend(
                agent_id=agent_id,
                landlord_id=landlord_id,
                reason_code=SuspensionReason.MUTUAL_AGREEMENT,
                duration_days=duration_days,
                now=T0,
            )

    @pytest.mark.asyncio
    async def test_duration_capped_by_settings(self, agent_id, landlord_id):
        """Durations above the configured maximum are rejected."""
        # Arrange
        service = SuspensionService(
            suspension_repository=InMemorySuspensionRepository(),
            settings=SuspensionSettings(max_duration_days=30),
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot exceed 30 days"):
            await service.suspend(
                agent_id=agent_id,
                landlord_id=landlord_id,
                reason_code=SuspensionReason.TERMINATING_CONTRACT,
                duration_days=31,
                now=T0,
            )

    @pytest.mark.asyncio
    async def test_invalid_suspend_keeps_previous(
        self, unit_env, agent_id, landlord_id
    ):
        """A rejected suspend does not touch the current record."""
        # Arrange
        service = await unit_env.get(SuspensionService)
        original = await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.POOR_PERFORMANCE,
            duration_days=3,
            now=T0,
        )

        # Act
        with pytest.raises(ValidationError):
            await service.suspend(
                agent_id=agent_id,
                landlord_id=landlord_id,
                reason_code=SuspensionReason.OTHER,
                duration_days=3,
                now=T0,
            )

        # Assert
        view = await service.current_suspension(agent_id, T0)
        assert view is not None
        assert view.record == original


class TestUnsuspend:
    """Tests for unsuspend."""

    @pytest.mark.asyncio
    async def test_unsuspend_removes_record(self, unit_env, agent_id, landlord_id):
        # Arrange
        service = await unit_env.get(SuspensionService)
        await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.POOR_PERFORMANCE,
            duration_days=3,
            now=T0,
        )

        # Act
        removed = await service.unsuspend(agent_id)

        # Assert
        assert removed is True
        assert await service.current_suspension(agent_id, T0) is None

    @pytest.mark.asyncio
    async def test_unsuspend_when_not_suspended_is_noop(self, unit_env, agent_id):
        """Lifting a suspension that does not exist is not an error."""
        service = await unit_env.get(SuspensionService)

        assert await service.unsuspend(agent_id) is False


class TestCurrentSuspension:
    """Tests for current_suspension."""

    @pytest.mark.asyncio
    async def test_not_suspended(self, unit_env, agent_id):
        service = await unit_env.get(SuspensionService)

        assert await service.current_suspension(agent_id, T0) is None

    @pytest.mark.asyncio
    async def test_expired_suspension_is_reported_not_lifted(
        self, unit_env, agent_id, landlord_id
    ):
        """Past the window the record is flagged but still returned."""
        # Arrange
        service = await unit_env.get(SuspensionService)
        await service.suspend(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.POOR_PERFORMANCE,
            duration_days=2,
            now=T0,
        )

        # Act
        view = await service.current_suspension(agent_id, T0 + timedelta(days=5))

        # Assert
        assert view is not None
        assert view.is_expired_by_time is True
        assert view.days_remaining == 0
        assert view.reason_label == "Poor Performance"
