"""Invitation notification contract and e-mail rendering."""

from abc import ABC, abstractmethod
from html import escape

from onboard.domain.model.invitation import Invitation
from onboard.domain.value import InvitationKind, InvitationNotice


class NotificationDispatcher(ABC):
    """Out-of-band delivery of invitation links."""

    @abstractmethod
    async def send(self, to: str, subject: str, html_body: str) -> bool:
        """Deliver a message.

        Returns:
            True if the message was handed over for delivery, False if it
            was skipped (e.g. no transport configured)

        Raises:
            Exception: Transport failures; callers log and swallow them
        """
        pass


def invitation_link(frontend_url: str, invitation: Invitation) -> str:
    """Public URL the invitee opens."""
    base = frontend_url.rstrip("/")
    if invitation.kind == InvitationKind.CLIENT_PORTAL:
        return f"{base}/portal/onboarding/{invitation.token.root}"
    return f"{base}/invitations/{invitation.token.root}"


def render_invitation_email(
    invitation: Invitation,
    notice: InvitationNotice,
    link: str,
    validity_days: int,
) -> tuple[str, str]:
    """Build subject and HTML body of the invitation e-mail.

    Returns:
        Tuple of (subject, html_body)
    """
    name = escape(notice.recipient_name)
    organisation = escape(notice.organisation_name)
    href = escape(link, quote=True)

    if invitation.kind == InvitationKind.CLIENT_PORTAL:
        subject = f"Client Portal invitation - {notice.organisation_name}"
        intro = (
            f"You have been invited to the Client Portal to complete the company "
            f"data of <strong>{organisation}</strong>."
        )
        action = "Create your account and accept the Terms and Conditions:"
        button = "Open the portal"
    else:
        subject = f"You have been invited to join {notice.organisation_name}"
        intro = f"You have been invited to join the <strong>{organisation}</strong> workspace."
        action = "Set your password to activate your access:"
        button = "Accept invitation"

    body = f"""
        <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
            <h2>Hello {name}!</h2>
            <p>{intro}</p>
            <p>{action}</p>
            <p style="margin: 30px 0;">
                <a href="{href}"
                   style="background-color: #fc5a34; color: white; padding: 12px 24px; text-decoration: none; border-radius: 6px; display: inline-block;">
                    {button}
                </a>
            </p>
            <p style="color: #666; font-size: 14px;">This link expires in {validity_days} days.</p>
            <p style="color: #666; font-size: 14px;">If you were not expecting this e-mail you can ignore it.</p>
        </div>
    """
    return subject, body
