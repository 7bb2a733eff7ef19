"""Repository interfaces for the agent lifecycle.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from agency.domain.repository.invitation_event import InvitationEventRepository
from agency.domain.repository.suspension import SuspensionRepository
from agency.domain.repository.user_directory import UserDirectory

__all__ = [
    "InvitationEventRepository",
    "SuspensionRepository",
    "UserDirectory",
]
