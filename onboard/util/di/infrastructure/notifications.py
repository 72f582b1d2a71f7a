"""Notification infrastructure providers."""

from dishka import Scope, provide

from onboard.adapter.email.smtp import SmtpNotificationDispatcher
from onboard.config import NotificationSettings
from onboard.domain.service import NotificationDispatcher
from onboard.util.di.base import ProviderBase


class NotificationsProvider(ProviderBase):
    """Notifications component base."""

    __mock_component__ = "notifications"


class ProdNotificationsProvider(NotificationsProvider):
    """Production notifications provider sending through SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_dispatcher(
        self, settings: NotificationSettings
    ) -> NotificationDispatcher:
        """Provide SMTP dispatcher (skips sending when SMTP is not configured)."""
        return SmtpNotificationDispatcher(settings)
