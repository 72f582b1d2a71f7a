"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from onboard.domain.error import DuplicateAccountError
from onboard.domain.model import UserAccount
from onboard.domain.model.common import utcnow
from onboard.domain.repository import AccountRepository
from onboard.domain.value import AccountId, AccountType, ContactId, normalize_email
from onboard.persistence.mappers import account_to_dict, row_to_account
from onboard.persistence.tables import accounts_table

from ._constraint import violated

EMAIL_CONSTRAINT = "accounts_email_key"


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[UserAccount]:
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        stmt = select(accounts_table).where(
            accounts_table.c.email == normalize_email(email)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def create(self, account: UserAccount) -> UserAccount:
        stmt = insert(accounts_table).values(**account_to_dict(account))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if violated(e, EMAIL_CONSTRAINT):
                raise DuplicateAccountError(account.email) from e
            raise
        return account

    async def link_contact(
        self,
        account_id: AccountId,
        contact_id: ContactId,
        account_type: AccountType,
    ) -> Optional[UserAccount]:
        stmt = (
            update(accounts_table)
            .where(
                and_(
                    accounts_table.c.id == account_id,
                    accounts_table.c.contact_id.is_(None),
                )
            )
            .values(
                contact_id=contact_id,
                account_type=account_type.value,
                updated_at=utcnow(),
            )
            .returning(accounts_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None
