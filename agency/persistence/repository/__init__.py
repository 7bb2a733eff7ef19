"""PostgreSQL repository implementations."""

from agency.persistence.repository.invitation_event import (
    PostgresInvitationEventRepository,
)
from agency.persistence.repository.suspension import PostgresSuspensionRepository
from agency.persistence.repository.user_directory import PostgresUserDirectory

__all__ = [
    "PostgresInvitationEventRepository",
    "PostgresSuspensionRepository",
    "PostgresUserDirectory",
]
