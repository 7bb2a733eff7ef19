"""User directory interface.

The directory owns landlord and agent identity rows. The lifecycle engine
only needs to check for existing accounts and create agent accounts once an
invitation token has been verified.
"""

from abc import ABC, abstractmethod

from agency.domain.value import AgentId, AgentProfile, UserId, UserRole


class UserDirectory(ABC):
    """Collaborator that stores users and agent profiles."""

    @abstractmethod
    async def email_exists(self, email: str) -> bool:
        """Check whether a user with this normalized email exists.

        Args:
            email: Normalized email

        Returns:
            True if a user exists, False otherwise
        """
        pass

    @abstractmethod
    async def create_user(self, profile: AgentProfile, role: UserRole) -> UserId:
        """Create a user.

        Args:
            profile: Profile of the new user
            role: Role to grant

        Returns:
            The new user's ID

        Raises:
            ConflictError: If a user with the email already exists
        """
        pass

    @abstractmethod
    async def create_agent_profile(self, user_id: UserId) -> AgentId:
        """Create the agent record for a user.

        Args:
            user_id: The agent's user

        Returns:
            The new agent's ID
        """
        pass
