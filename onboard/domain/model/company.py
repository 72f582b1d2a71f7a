"""Client company and contact entities.

The company is the onboarding target of client portal invitations: its
legal data must be complete before the terms can be accepted, and nothing
can change once they are.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from onboard.domain.model.common import DomainModel, utcnow
from onboard.domain.value import (
    REQUIRED_COMPANY_FIELDS,
    CompanyId,
    ContactId,
    OnboardingState,
    WorkspaceId,
)


class Company(DomainModel):
    """Client company aggregate.

    terms_accepted only ever goes from False to True, and the acceptance
    fields are written together with that flip.
    """

    id: CompanyId
    workspace_id: Optional[WorkspaceId] = None
    name: str

    legal_name: Optional[str] = None
    tax_id: Optional[str] = None
    fiscal_address: Optional[str] = None

    terms_accepted: bool = False
    terms_accepted_at: Optional[datetime] = None
    terms_accepted_by_id: Optional[ContactId] = None
    terms_accepted_by_name: Optional[str] = None
    terms_version: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def missing_fields(self) -> list[str]:
        """Required fields that are still empty."""
        return [
            name
            for name in REQUIRED_COMPANY_FIELDS
            if not (getattr(self, name) or "").strip()
        ]

    @property
    def onboarding_state(self) -> OnboardingState:
        if self.terms_accepted:
            return OnboardingState.ACCEPTED
        if self.missing_fields:
            return OnboardingState.DATA_INCOMPLETE
        return OnboardingState.DATA_COMPLETE


class Contact(DomainModel):
    """Person at a client company who can be invited to the portal."""

    id: ContactId
    company_id: CompanyId
    full_name: str
    email: str
    created_at: datetime = Field(default_factory=utcnow)
