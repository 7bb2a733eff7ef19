"""In-memory user directory for testing."""

import asyncio
from uuid import uuid4

from agency.domain.error import ConflictError, NotFoundError
from agency.domain.repository import UserDirectory
from agency.domain.value import AgentId, AgentProfile, UserId, UserRole


class InMemoryUserDirectory(UserDirectory):
    """In-memory implementation of UserDirectory for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, tuple[AgentProfile, UserRole]] = {}
        self._emails: set[str] = set()
        self._agents: dict[AgentId, UserId] = {}
        self._lock = asyncio.Lock()

    async def email_exists(self, email: str) -> bool:
        """Check whether a user already owns the email."""
        return email in self._emails

    async def create_user(self, profile: AgentProfile, role: UserRole) -> UserId:
        """Create a user account.

        Raises:
            ConflictError: If the email is taken
        """
        async with self._lock:
            if profile.email in self._emails:
                raise ConflictError(f"A user with email {profile.email} already exists")
            user_id = UserId(uuid4())
            self._users[user_id] = (profile, role)
            self._emails.add(profile.email)
            return user_id

    async def create_agent_profile(self, user_id: UserId) -> AgentId:
        """Create the agent profile for a user.

        Raises:
            NotFoundError: If the user does not exist
        """
        async with self._lock:
            if user_id not in self._users:
                raise NotFoundError("User", str(user_id))
            agent_id = AgentId(uuid4())
            self._agents[agent_id] = user_id
            return agent_id
