"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from agency.config import Settings
from agency.domain.repository import (
    InvitationEventRepository,
    SuspensionRepository,
    UserDirectory,
)
from agency.persistence.database import create_engine, create_session_factory
from agency.persistence.repository import (
    PostgresInvitationEventRepository,
    PostgresSuspensionRepository,
    PostgresUserDirectory,
)
from agency.util.di.base import ProviderBase
from agency.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_invitation_event_repository(
        self, session: AsyncSession
    ) -> InvitationEventRepository:
        """Provide invitation event log."""
        return PostgresInvitationEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_suspension_repository(self, session: AsyncSession) -> SuspensionRepository:
        """Provide suspension repository."""
        return PostgresSuspensionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_directory(self, session: AsyncSession) -> UserDirectory:
        """Provide user directory."""
        return PostgresUserDirectory(session)
