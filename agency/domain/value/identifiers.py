"""Strongly typed identifiers for agency domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
EventId = NewType("EventId", UUID)
LandlordId = NewType("LandlordId", UUID)
AgentId = NewType("AgentId", UUID)
UserId = NewType("UserId", UUID)
