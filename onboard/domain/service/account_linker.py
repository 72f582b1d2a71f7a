"""Account linking domain service."""

from uuid import uuid4

import logfire

from onboard.domain.error import DuplicateAccountError
from onboard.domain.model.account import UserAccount
from onboard.domain.model.invitation import Invitation
from onboard.domain.repository import AccountRepository, ContactRepository
from onboard.domain.value import (
    AccountId,
    AccountType,
    Err,
    ErrorKind,
    InvitationKind,
    InvitationStatus,
    Ok,
    Result,
    normalize_email,
)
from onboard.domain.value.common import ValueObject

from .base import Service
from .clock import Clock
from .credential import CredentialHasher

_ACCOUNT_TYPES = {
    InvitationKind.CLIENT_PORTAL: AccountType.CLIENT,
    InvitationKind.TEAM: AccountType.INTERNAL,
}


class LinkedAccount(ValueObject):
    """Account resolved from an invitation."""

    account: UserAccount
    is_new: bool

    @property
    def account_id(self) -> AccountId:
        return self.account.id


class AccountLinker(Service):
    """Resolves an invitation into a user account.

    Creates the account or links an existing one, but never touches the
    invitation status: consumption happens later, so a half-finished
    onboarding can be resumed with the same link.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
        credential_hasher: CredentialHasher,
        clock: Clock,
    ) -> None:
        """Initialize account linker.

        Args:
            account_repository: Account repository
            contact_repository: Contact repository (client invitee emails)
            credential_hasher: Password hashing primitive
            clock: Time source
        """
        self.account_repository = account_repository
        self.contact_repository = contact_repository
        self.credential_hasher = credential_hasher
        self.clock = clock

    async def resolve_account(
        self, invitation: Invitation, name: str, password: str
    ) -> Result[LinkedAccount]:
        """Create or link the account addressed by an invitation.

        Args:
            invitation: A pending invitation
            name: Display name for a new account
            password: Credential for a new account, or the password of the
                existing account being linked

        Returns:
            Ok with the account and whether it was created, Err(INVALID_STATE)
            if the invitation is not pending or the existing account cannot
            take it, Err(UNAUTHORIZED) if an existing account does not match
            the password
        """
        with logfire.span(
            "account_linker.resolve_account",
            invitation_id=str(invitation.id),
            kind=invitation.kind.value,
        ):
            if invitation.status != InvitationStatus.PENDING:
                logfire.warn(
                    "Account resolution on non-pending invitation",
                    invitation_id=str(invitation.id),
                    status=invitation.status.value,
                )
                return Err(
                    ErrorKind.INVALID_STATE,
                    f"Invitation is {invitation.status.value}",
                )

            email = await self._target_email(invitation)
            if email is None:
                return Err(ErrorKind.NOT_FOUND, "Invited contact not found")

            existing = await self.account_repository.find_by_email(email)
            if existing is None:
                try:
                    created = await self._create(invitation, email, name, password)
                except DuplicateAccountError:
                    # Same email registered concurrently: continue as existing
                    existing = await self.account_repository.find_by_email(email)
                    if existing is None:
                        raise
                else:
                    logfire.info(
                        "Account created from invitation",
                        account_id=str(created.id),
                        account_type=created.account_type.value,
                    )
                    return Ok(LinkedAccount(account=created, is_new=True))

            if not (
                existing.password_hash
                and self.credential_hasher.verify(password, existing.password_hash)
            ):
                # The caller must prove they own the account before it is linked
                logfire.warn(
                    "Existing account password mismatch", account_id=str(existing.id)
                )
                return Err(
                    ErrorKind.UNAUTHORIZED,
                    "An account already exists for this email; use its password",
                )

            linked = await self._link(existing, invitation)
            if isinstance(linked, Err):
                return linked
            return Ok(LinkedAccount(account=linked.value, is_new=False))

    async def _create(
        self, invitation: Invitation, email: str, name: str, password: str
    ) -> UserAccount:
        now = self.clock.now()
        account = UserAccount(
            id=AccountId(uuid4()),
            email=email,
            name=name.strip() or email,
            password_hash=self.credential_hasher.hash(password),
            account_type=_ACCOUNT_TYPES[invitation.kind],
            contact_id=invitation.contact_id,
            created_at=now,
            updated_at=now,
        )
        return await self.account_repository.create(account)

    async def _link(
        self, account: UserAccount, invitation: Invitation
    ) -> Result[UserAccount]:
        """Attach the invited contact to an existing account if it has none."""
        if invitation.contact_id is None:
            if account.account_type != AccountType.INTERNAL:
                logfire.warn(
                    "Client account cannot join a workspace",
                    account_id=str(account.id),
                    invitation_id=str(invitation.id),
                )
                return Err(
                    ErrorKind.INVALID_STATE,
                    "Client portal accounts cannot join a workspace",
                    {"account_type": account.account_type.value},
                )
            logfire.info("Existing account reused", account_id=str(account.id))
            return Ok(account)

        if account.contact_id is not None:
            if account.contact_id != invitation.contact_id:
                logfire.warn(
                    "Account already linked to another contact",
                    account_id=str(account.id),
                    contact_id=str(account.contact_id),
                    invited_contact_id=str(invitation.contact_id),
                )
                return Err(
                    ErrorKind.INVALID_STATE,
                    "This account is already linked to another client contact",
                )
            return Ok(account)

        linked = await self.account_repository.link_contact(
            account.id, invitation.contact_id, AccountType.CLIENT
        )
        if linked is None:
            # Linked concurrently; the stored link is authoritative
            stored = await self.account_repository.find_by_id(account.id) or account
            if stored.contact_id != invitation.contact_id:
                return Err(
                    ErrorKind.INVALID_STATE,
                    "This account is already linked to another client contact",
                )
            return Ok(stored)

        logfire.info(
            "Existing account linked to contact",
            account_id=str(account.id),
            contact_id=str(invitation.contact_id),
        )
        return Ok(linked)

    async def _target_email(self, invitation: Invitation) -> str | None:
        if invitation.kind == InvitationKind.TEAM:
            return invitation.email

        contact = (
            await self.contact_repository.find_by_id(invitation.contact_id)
            if invitation.contact_id
            else None
        )
        if contact is None:
            logfire.warn(
                "Invited contact missing", contact_id=str(invitation.contact_id)
            )
            return None
        return normalize_email(contact.email)
