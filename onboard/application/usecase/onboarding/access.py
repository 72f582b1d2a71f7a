"""How onboarding callers reach their company.

Either through the invitation link (token) or, once signed in, through the
portal account linked to a contact.
"""

from typing import Optional

from pydantic import BaseModel

from onboard.application.usecase.common import invitation_of_kind, load_actor
from onboard.domain.model import Contact, Invitation
from onboard.domain.repository import AccountRepository, ContactRepository
from onboard.domain.service import InvitationService, status_error
from onboard.domain.value import (
    AccountType,
    Err,
    ErrorKind,
    InvitationKind,
    InvitationStatus,
    Ok,
    Result,
)


class OnboardingAccess(BaseModel):
    """Exactly one of token or account_id identifies the caller."""

    token: Optional[str] = None
    account_id: Optional[str] = None


async def pending_invitation(
    invitation_service: InvitationService, token: str, kind: InvitationKind
) -> Result[Invitation]:
    """Resolve a link that must still be usable."""
    resolved = invitation_of_kind(await invitation_service.resolve(token), kind)
    if isinstance(resolved, Err):
        return resolved
    if resolved.value.status != InvitationStatus.PENDING:
        return status_error(resolved.value)
    return resolved


async def portal_contact(
    account_repository: AccountRepository,
    contact_repository: ContactRepository,
    account_id: str,
) -> Result[Contact]:
    """Contact behind a signed-in portal account."""
    actor = await load_actor(account_repository, account_id, AccountType.CLIENT)
    if isinstance(actor, Err):
        return actor
    if actor.value.contact_id is None:
        return Err(ErrorKind.UNAUTHORIZED, "Account is not linked to a contact")

    contact = await contact_repository.find_by_id(actor.value.contact_id)
    if contact is None:
        return Err(ErrorKind.NOT_FOUND, "Contact not found")
    return Ok(contact)


async def resolve_contact(
    access: OnboardingAccess,
    invitation_service: InvitationService,
    account_repository: AccountRepository,
    contact_repository: ContactRepository,
) -> Result[Contact]:
    """Contact acting on the company, from the link or from the session."""
    if (access.token is None) == (access.account_id is None):
        return Err(ErrorKind.INVALID_INPUT, "Provide either a token or a session")

    if access.account_id is not None:
        return await portal_contact(
            account_repository, contact_repository, access.account_id
        )

    invitation = await pending_invitation(
        invitation_service, access.token, InvitationKind.CLIENT_PORTAL
    )
    if isinstance(invitation, Err):
        return invitation

    contact = await contact_repository.find_by_id(invitation.value.contact_id)
    if contact is None or contact.company_id != invitation.value.company_id:
        return Err(ErrorKind.NOT_FOUND, "Invited contact not found")
    return Ok(contact)
