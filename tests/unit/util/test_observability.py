"""Unit tests for request span attributes."""

from types import SimpleNamespace
from uuid import uuid4

from agency.util.observability import _map_request_attributes


class TestMapRequestAttributes:
    def test_token_is_truncated(self):
        # Arrange
        request = SimpleNamespace(path_params={})
        attributes = {"values": {"token": "a" * 64, "email": "a@example.com"}}

        # Act
        result = _map_request_attributes(request, attributes)

        # Assert
        assert result["values"]["token"] == "aaaaaaaa..."
        assert result["values"]["email"] == "a@example.com"
        assert attributes["values"]["token"] == "a" * 64

    def test_path_ids_are_attached(self):
        # Arrange
        landlord_id = uuid4()
        agent_id = uuid4()
        request = SimpleNamespace(
            path_params={"landlord_id": landlord_id, "agent_id": agent_id}
        )

        # Act
        result = _map_request_attributes(request, {})

        # Assert
        assert result["landlord_id"] == str(landlord_id)
        assert result["agent_id"] == str(agent_id)
