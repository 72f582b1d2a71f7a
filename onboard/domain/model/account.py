"""User account entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from onboard.domain.model.common import DomainModel, utcnow
from onboard.domain.value import AccountId, AccountType, ContactId


class UserAccount(DomainModel):
    """User account - portal client or internal teammate.

    Once contact_id is set the onboarding flow never clears it.
    """

    id: AccountId
    email: str  # Unique, lowercase
    name: str
    password_hash: Optional[str] = None
    account_type: AccountType = AccountType.INTERNAL
    contact_id: Optional[ContactId] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
