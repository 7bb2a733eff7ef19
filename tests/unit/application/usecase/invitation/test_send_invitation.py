"""Unit tests for SendInvitationUseCase."""

from datetime import timedelta
from urllib.parse import parse_qs, urlparse

from dishka import AsyncContainer
import pytest

from agency.application.usecase.invitation.send_invitation import (
    SendInvitationRequest,
    SendInvitationUseCase,
)
from agency.config import InvitationSettings
from agency.domain.error import ConflictError, InvalidEmailError
from agency.domain.repository import UserDirectory
from agency.domain.service import FixedClock, InvitationService, LifecycleService
from agency.domain.value import AgentProfile, InvitationStatus, UserRole
from tests.factories import T0
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


FRONTEND_URL = "https://app.example.com"


async def _use_case(
    env: AsyncContainer,
    clock: FixedClock,
    settings: InvitationSettings | None = None,
) -> SendInvitationUseCase:
    return SendInvitationUseCase(
        invitation_service=await env.get(InvitationService),
        user_directory=await env.get(UserDirectory),
        clock=clock,
        settings=settings or await env.get(InvitationSettings),
        frontend_url=FRONTEND_URL,
    )


def _request(landlord_id, email="Worker@Example.com") -> SendInvitationRequest:
    return SendInvitationRequest(
        landlord_id=landlord_id,
        email=email,
        first_name="Ana",
        last_name="Silva",
        phone="+351 900 000 000",
    )


class TestSendInvitationUseCase:
    """Tests for SendInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_builds_registration_link(self, unit_env, landlord_id):
        """The link carries the token and the normalized email."""
        # Arrange
        settings = await unit_env.get(InvitationSettings)
        use_case = await _use_case(unit_env, FixedClock(T0))

        # Act
        response = await use_case.execute(_request(landlord_id))

        # Assert
        assert response.email == "worker@example.com"
        assert response.expires_at > T0
        url = urlparse(response.invitation_url)
        assert response.invitation_url.startswith(FRONTEND_URL)
        assert url.path == settings.registration_path
        assert parse_qs(url.query) == {
            "token": [response.token],
            "email": ["worker@example.com"],
        }

    @pytest.mark.asyncio
    async def test_expiry_follows_settings(self, unit_env, landlord_id):
        # Arrange
        settings = InvitationSettings(
            expiry_days=3, token_bytes=16, registration_path="/join"
        )
        use_case = await _use_case(unit_env, FixedClock(T0), settings=settings)

        # Act
        response = await use_case.execute(_request(landlord_id))

        # Assert
        assert response.expires_at == T0 + timedelta(days=3)
        assert len(response.token) == 32
        assert urlparse(response.invitation_url).path == "/join"

    @pytest.mark.asyncio
    async def test_resend_refreshes_invitation(self, unit_env, landlord_id):
        """A second invite to the same email leaves one invitation."""
        # Arrange
        clock = FixedClock(T0)
        use_case = await _use_case(unit_env, clock)
        lifecycle = await unit_env.get(LifecycleService)
        first = await use_case.execute(_request(landlord_id))

        # Act
        clock.advance(days=2)
        second = await use_case.execute(_request(landlord_id))

        # Assert
        invitations = await lifecycle.list_invitations_for_landlord(
            landlord_id, clock.now()
        )
        assert len(invitations) == 1
        assert invitations[0].status == InvitationStatus.PENDING
        assert invitations[0].expires_at == second.expires_at
        assert second.token != first.token

    @pytest.mark.asyncio
    async def test_existing_user_cannot_be_invited(self, unit_env, landlord_id):
        # Arrange
        directory = await unit_env.get(UserDirectory)
        await directory.create_user(
            AgentProfile(email="worker@example.com"), UserRole.TENANT
        )
        use_case = await _use_case(unit_env, FixedClock(T0))

        # Act & Assert
        with pytest.raises(ConflictError):
            await use_case.execute(_request(landlord_id))

    @pytest.mark.asyncio
    async def test_malformed_email(self, unit_env, landlord_id):
        use_case = await _use_case(unit_env, FixedClock(T0))

        with pytest.raises(InvalidEmailError):
            await use_case.execute(_request(landlord_id, email="not-an-email"))
