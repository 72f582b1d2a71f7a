"""SMTP notification dispatcher."""

from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib
import logfire

from onboard.adapter.error import NotificationDeliveryError
from onboard.config import NotificationSettings
from onboard.domain.service.notification import NotificationDispatcher


class SmtpNotificationDispatcher(NotificationDispatcher):
    """Sends HTML e-mails through an SMTP relay.

    When no SMTP host is configured, messages are logged and skipped.
    """

    def __init__(self, settings: NotificationSettings) -> None:
        """Initialize dispatcher.

        Args:
            settings: SMTP and sender configuration
        """
        self.settings = settings

    def build_message(self, to: str, subject: str, html_body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = formataddr((self.settings.from_name, self.settings.from_email))
        message["To"] = to
        message["Subject"] = subject
        message.set_content("Open this message in an HTML capable mail client.")
        message.add_alternative(html_body, subtype="html")
        return message

    async def send(self, to: str, subject: str, html_body: str) -> bool:
        """Send a message.

        Returns:
            True when the relay accepted the message, False when SMTP is not
            configured

        Raises:
            NotificationDeliveryError: If the relay refused or was unreachable
        """
        if not self.settings.enabled:
            logfire.warn("SMTP not configured, e-mail skipped", to=to, subject=subject)
            return False

        with logfire.span("smtp.send", to=to):
            try:
                await aiosmtplib.send(
                    self.build_message(to, subject, html_body),
                    hostname=self.settings.smtp_host,
                    port=self.settings.smtp_port,
                    username=self.settings.smtp_username,
                    password=self.settings.smtp_password,
                    start_tls=self.settings.smtp_use_tls,
                    timeout=self.settings.smtp_timeout,
                )
            except aiosmtplib.SMTPException as e:
                raise NotificationDeliveryError(f"SMTP delivery failed: {e}") from e

            logfire.info("E-mail sent", to=to, subject=subject)
            return True
