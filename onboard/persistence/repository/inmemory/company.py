"""In-memory company and contact repositories for testing."""

from datetime import datetime
from typing import Any, Optional

from onboard.domain.model.company import Company, Contact
from onboard.domain.repository.company import CompanyRepository, ContactRepository
from onboard.domain.value import (
    REQUIRED_COMPANY_FIELDS,
    CompanyId,
    ContactId,
    TermsAcceptance,
)

from .store import InMemoryStore


class InMemoryCompanyRepository(CompanyRepository):
    """In-memory implementation of CompanyRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        return self.store.companies.get(company_id)

    async def update_fields(
        self, company_id: CompanyId, fields: dict[str, Any], updated_at: datetime
    ) -> Optional[Company]:
        unknown = set(fields) - set(REQUIRED_COMPANY_FIELDS)
        if unknown:
            raise ValueError(f"Not an onboarding field: {sorted(unknown)}")

        company = self.store.companies.get(company_id)
        if company is None or company.terms_accepted:
            return None
        updated = company.model_copy(update={**fields, "updated_at": updated_at})
        return self.store.add_company(updated)

    async def record_acceptance(
        self, company_id: CompanyId, acceptance: TermsAcceptance
    ) -> Optional[Company]:
        company = self.store.companies.get(company_id)
        if company is None or company.terms_accepted or company.missing_fields:
            return None
        updated = company.model_copy(
            update={
                "terms_accepted": True,
                "terms_accepted_at": acceptance.accepted_at,
                "terms_accepted_by_id": acceptance.accepted_by_id,
                "terms_accepted_by_name": acceptance.accepted_by_name,
                "terms_version": acceptance.version,
                "updated_at": acceptance.accepted_at,
            }
        )
        return self.store.add_company(updated)


class InMemoryContactRepository(ContactRepository):
    """In-memory implementation of ContactRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        return self.store.contacts.get(contact_id)
