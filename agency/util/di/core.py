"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from agency.config import InvitationSettings, Settings, SuspensionSettings
from agency.domain.service import Clock, SystemClock
from agency.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_suspension_settings(self, settings: Settings) -> SuspensionSettings:
        """Provide suspension settings."""
        return settings.suspensions

    @provide(scope=Scope.APP)
    def provide_clock(self) -> Clock:
        """Provide the wall clock."""
        return SystemClock()
