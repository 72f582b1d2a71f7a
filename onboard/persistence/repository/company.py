"""PostgreSQL implementations of Company and Contact repositories."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from onboard.domain.model import Company, Contact
from onboard.domain.repository import CompanyRepository, ContactRepository
from onboard.domain.value import (
    REQUIRED_COMPANY_FIELDS,
    CompanyId,
    ContactId,
    TermsAcceptance,
)
from onboard.persistence.mappers import row_to_company, row_to_contact
from onboard.persistence.tables import companies_table, contacts_table


class PostgresCompanyRepository(CompanyRepository):
    """PostgreSQL implementation of CompanyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        stmt = select(companies_table).where(companies_table.c.id == company_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_company(dict(row)) if row else None

    async def update_fields(
        self, company_id: CompanyId, fields: dict[str, Any], updated_at: datetime
    ) -> Optional[Company]:
        unknown = set(fields) - set(REQUIRED_COMPANY_FIELDS)
        if unknown:
            raise ValueError(f"Not an onboarding field: {sorted(unknown)}")

        stmt = (
            update(companies_table)
            .where(
                and_(
                    companies_table.c.id == company_id,
                    companies_table.c.terms_accepted.is_(False),
                )
            )
            .values(**fields, updated_at=updated_at)
            .returning(companies_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_company(dict(row)) if row else None

    async def record_acceptance(
        self, company_id: CompanyId, acceptance: TermsAcceptance
    ) -> Optional[Company]:
        """Accept the terms only if not accepted yet and the data is complete."""
        data_complete = [
            func.length(func.trim(func.coalesce(companies_table.c[name], ""))) > 0
            for name in REQUIRED_COMPANY_FIELDS
        ]
        stmt = (
            update(companies_table)
            .where(
                and_(
                    companies_table.c.id == company_id,
                    companies_table.c.terms_accepted.is_(False),
                    *data_complete,
                )
            )
            .values(
                terms_accepted=True,
                terms_accepted_at=acceptance.accepted_at,
                terms_accepted_by_id=acceptance.accepted_by_id,
                terms_accepted_by_name=acceptance.accepted_by_name,
                terms_version=acceptance.version,
                updated_at=acceptance.accepted_at,
            )
            .returning(companies_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_company(dict(row)) if row else None


class PostgresContactRepository(ContactRepository):
    """PostgreSQL implementation of ContactRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        stmt = select(contacts_table).where(contacts_table.c.id == contact_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_contact(dict(row)) if row else None
