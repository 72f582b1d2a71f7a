"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from onboard.config import (
    AuthSettings,
    InvitationSettings,
    NotificationSettings,
    OnboardingSettings,
    Settings,
)
from onboard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_onboarding_settings(self, settings: Settings) -> OnboardingSettings:
        return settings.onboarding

    @provide(scope=Scope.APP)
    def provide_notification_settings(
        self, settings: Settings
    ) -> NotificationSettings:
        return settings.notifications
