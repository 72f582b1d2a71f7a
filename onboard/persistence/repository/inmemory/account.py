"""In-memory account repository for testing."""

from typing import Optional

from onboard.domain.error import DuplicateAccountError
from onboard.domain.model.account import UserAccount
from onboard.domain.model.common import utcnow
from onboard.domain.repository.account import AccountRepository
from onboard.domain.value import AccountId, AccountType, ContactId, normalize_email

from .store import InMemoryStore


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, account_id: AccountId) -> Optional[UserAccount]:
        return self.store.accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        email = normalize_email(email)
        for account in self.store.accounts.values():
            if account.email == email:
                return account
        return None

    async def create(self, account: UserAccount) -> UserAccount:
        """Insert a new account.

        Raises:
            DuplicateAccountError: If the email is already registered
        """
        if await self.find_by_email(account.email) is not None:
            raise DuplicateAccountError(account.email)
        return self.store.add_account(account)

    async def link_contact(
        self,
        account_id: AccountId,
        contact_id: ContactId,
        account_type: AccountType,
    ) -> Optional[UserAccount]:
        account = self.store.accounts.get(account_id)
        if account is None or account.contact_id is not None:
            return None
        linked = account.model_copy(
            update={
                "contact_id": contact_id,
                "account_type": account_type,
                "updated_at": utcnow(),
            }
        )
        return self.store.add_account(linked)
