"""Test configuration and fixtures."""

from uuid import uuid4

import logfire
import pytest

from agency.domain.value import AgentId, LandlordId

# Telemetry stays local and silent during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def landlord_id() -> LandlordId:
    """A fresh landlord."""
    return LandlordId(uuid4())


@pytest.fixture
def agent_id() -> AgentId:
    """A fresh agent."""
    return AgentId(uuid4())
