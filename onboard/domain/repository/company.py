"""Company and contact repository interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from onboard.domain.model.company import Company, Contact
from onboard.domain.value import CompanyId, ContactId, TermsAcceptance


class CompanyRepository(ABC):
    """Repository for the Company aggregate.

    Both mutating operations are guarded by ``terms_accepted = false`` and
    must be implemented as single conditional writes.
    """

    @abstractmethod
    async def find_by_id(self, company_id: CompanyId) -> Optional[Company]:
        """Find a company by ID."""
        pass

    @abstractmethod
    async def update_fields(
        self, company_id: CompanyId, fields: dict[str, Any], updated_at: datetime
    ) -> Optional[Company]:
        """Write onboarding data fields while the terms are not accepted.

        Args:
            company_id: Company to update
            fields: Column values to write (subset of the required fields)
            updated_at: Modification timestamp

        Returns:
            The updated company, None if missing or already accepted
        """
        pass

    @abstractmethod
    async def record_acceptance(
        self, company_id: CompanyId, acceptance: TermsAcceptance
    ) -> Optional[Company]:
        """Flip terms_accepted and stamp the acceptance fields in one write.

        Args:
            company_id: Company accepting the terms
            acceptance: Acceptance record

        Returns:
            The updated company, None if missing or already accepted
        """
        pass


class ContactRepository(ABC):
    """Repository for client contacts."""

    @abstractmethod
    async def find_by_id(self, contact_id: ContactId) -> Optional[Contact]:
        """Find a contact by ID."""
        pass
