"""Tests for row mappers."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agency.domain.model import AgentAccountCreated, InvitationSent, SuspensionRecord
from agency.domain.value import SuspensionReason, UserId
from agency.persistence.mappers import (
    event_to_dict,
    row_to_event,
    row_to_sent,
    row_to_suspension,
    suspension_to_dict,
)
from tests.factories import T0, account_created, approved, sent


class TestEventMapping:
    def test_sent_row_carries_token_and_no_agent(self, landlord_id):
        # Arrange
        event = sent("a@example.com", landlord_id, token="abc", first_name="Ana")

        # Act
        row = event_to_dict(event)

        # Assert
        assert row["kind"] == "sent"
        assert row["token"] == "abc"
        assert row["expires_at"] == T0 + timedelta(days=7)
        assert row["agent_id"] is None
        assert "sequence" not in row

    def test_row_with_string_ids(self, landlord_id, agent_id):
        """Rows whose UUIDs come back as strings still map to events."""
        # Arrange
        user_id = UserId(uuid4())
        event = account_created(
            "a@example.com", landlord_id, agent_id, T0, agent_user_id=user_id
        )
        row = {
            key: str(value) if key.endswith("id") and value else value
            for key, value in event_to_dict(event).items()
        }
        row["sequence"] = 7

        # Act
        mapped = row_to_event(row)

        # Assert
        assert isinstance(mapped, AgentAccountCreated)
        assert mapped.agent_id == agent_id
        assert mapped.agent_user_id == user_id
        assert mapped.sequence == 7

    def test_sent_row(self, landlord_id):
        # Arrange
        row = event_to_dict(sent("a@example.com", landlord_id, token="abc"))
        row["sequence"] = 1

        # Act
        mapped = row_to_event(row)

        # Assert
        assert isinstance(mapped, InvitationSent)
        assert mapped.token.root == "abc"

    def test_sent_mapper_rejects_other_kinds(self, landlord_id, agent_id):
        row = event_to_dict(approved("a@example.com", landlord_id, agent_id, T0))

        with pytest.raises(ValueError):
            row_to_sent(row)


class TestSuspensionMapping:
    def test_reason_code_stored_as_value(self, agent_id, landlord_id):
        # Arrange
        record = SuspensionRecord(
            agent_id=agent_id,
            landlord_id=landlord_id,
            reason_code=SuspensionReason.OTHER,
            reason_text="Repeated no-shows",
            duration_days=2,
            started_at=T0,
            ends_at=T0 + timedelta(days=2),
        )

        # Act
        row = suspension_to_dict(record)

        # Assert
        assert row["reason_code"] == "OTHER"
        assert row_to_suspension(row) == record
