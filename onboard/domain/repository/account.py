"""User account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from onboard.domain.model.account import UserAccount
from onboard.domain.value import AccountId, AccountType, ContactId


class AccountRepository(ABC):
    """Repository for user accounts."""

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[UserAccount]:
        """Find an account by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        """Find an account by (normalized) email."""
        pass

    @abstractmethod
    async def create(self, account: UserAccount) -> UserAccount:
        """Insert a new account.

        Raises:
            DuplicateAccountError: If the email is already registered
        """
        pass

    @abstractmethod
    async def link_contact(
        self,
        account_id: AccountId,
        contact_id: ContactId,
        account_type: AccountType,
    ) -> Optional[UserAccount]:
        """Attach a contact to an account that has none yet.

        Conditional on ``contact_id IS NULL``; credentials are left untouched.

        Returns:
            The updated account, None if the guard did not match
        """
        pass
