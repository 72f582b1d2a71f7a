"""Notification dispatcher that keeps messages in memory."""

from dataclasses import dataclass

import logfire

from onboard.adapter.error import NotificationDeliveryError
from onboard.domain.service.notification import NotificationDispatcher


@dataclass(frozen=True)
class SentMessage:
    to: str
    subject: str
    html_body: str


class RecordingNotificationDispatcher(NotificationDispatcher):
    """Records every message instead of delivering it.

    Set ``fail`` to make ``send`` raise, or ``skip`` to make it return False.
    """

    def __init__(self) -> None:
        self.sent: list[SentMessage] = []
        self.fail = False
        self.skip = False

    async def send(self, to: str, subject: str, html_body: str) -> bool:
        if self.fail:
            raise NotificationDeliveryError(f"Delivery to {to} failed")
        if self.skip:
            return False

        self.sent.append(SentMessage(to=to, subject=subject, html_body=html_body))
        logfire.info("E-mail recorded", to=to, subject=subject)
        return True

    def last_to(self, to: str) -> SentMessage | None:
        """Most recent message sent to an address."""
        for message in reversed(self.sent):
            if message.to == to:
                return message
        return None
