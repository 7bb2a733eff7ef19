"""PostgreSQL implementation of the user directory."""

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agency.domain.error import ConflictError
from agency.domain.repository import UserDirectory
from agency.domain.value import AgentId, AgentProfile, UserId, UserRole
from agency.persistence.tables import agents_table, users_table


class PostgresUserDirectory(UserDirectory):
    """PostgreSQL implementation of UserDirectory."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize directory with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def email_exists(self, email: str) -> bool:
        """Check whether a user owns the email.

        Args:
            email: Normalized email

        Returns:
            True if a user exists
        """
        stmt = select(users_table.c.id).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create_user(self, profile: AgentProfile, role: UserRole) -> UserId:
        """Insert a user row.

        Args:
            profile: Profile of the new user
            role: Role to grant

        Returns:
            The new user's ID

        Raises:
            ConflictError: If the email is taken
        """
        stmt = (
            insert(users_table)
            .values(
                email=profile.email,
                first_name=profile.first_name,
                last_name=profile.last_name,
                phone=profile.phone,
                role=role.value,
            )
            .returning(users_table.c.id)
        )
        try:
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        except IntegrityError as e:
            raise ConflictError(
                f"A user with email {profile.email} already exists"
            ) from e
        return UserId(result.scalar_one())

    async def create_agent_profile(self, user_id: UserId) -> AgentId:
        """Insert the agent row for a user.

        Args:
            user_id: The agent's user

        Returns:
            The new agent's ID
        """
        stmt = insert(agents_table).values(user_id=user_id).returning(agents_table.c.id)
        result = await self.session.execute(stmt)
        return AgentId(result.scalar_one())
