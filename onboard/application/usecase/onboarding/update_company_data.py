"""Update company data use case."""

from typing import Optional

import logfire

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import CompanyView
from onboard.application.usecase.onboarding.access import (
    OnboardingAccess,
    resolve_contact,
)
from onboard.domain.repository import AccountRepository, ContactRepository
from onboard.domain.service import InvitationService, OnboardingGate
from onboard.domain.value import CompanyData, Err, Ok, Result


class UpdateCompanyDataRequest(OnboardingAccess):
    """Any subset of the legally required company fields."""

    legal_name: Optional[str] = None
    tax_id: Optional[str] = None
    fiscal_address: Optional[str] = None


class UpdateCompanyDataUseCase(BaseUseCase):
    """Save company data while the terms are not accepted yet."""

    def __init__(
        self,
        onboarding_gate: OnboardingGate,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
    ) -> None:
        self.onboarding_gate = onboarding_gate
        self.invitation_service = invitation_service
        self.account_repository = account_repository
        self.contact_repository = contact_repository

    async def execute(self, request: UpdateCompanyDataRequest) -> Result[CompanyView]:
        with logfire.span(
            "update_company_data.execute", via_token=request.token is not None
        ):
            contact = await resolve_contact(
                request,
                self.invitation_service,
                self.account_repository,
                self.contact_repository,
            )
            if isinstance(contact, Err):
                return contact

            updated = await self.onboarding_gate.update_target_data(
                contact.value.company_id,
                CompanyData(
                    legal_name=request.legal_name,
                    tax_id=request.tax_id,
                    fiscal_address=request.fiscal_address,
                ),
            )
            if isinstance(updated, Err):
                return updated
            return Ok(CompanyView.from_company(updated.value))
