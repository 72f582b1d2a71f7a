"""Accept terms use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import CompanyView
from onboard.application.usecase.onboarding.access import (
    OnboardingAccess,
    resolve_contact,
)
from onboard.domain.repository import AccountRepository, ContactRepository
from onboard.domain.service import InvitationService, OnboardingGate
from onboard.domain.value import Err, Ok, Result


class AcceptTermsRequest(OnboardingAccess):
    """Acceptance on behalf of the company.

    contact_name defaults to the contact's registered name.
    """

    contact_name: Optional[str] = None


class AcceptTermsResponse(BaseModel):
    company: CompanyView
    invitation_consumed: bool


class AcceptTermsUseCase(BaseUseCase):
    """Final onboarding step: accept the terms and close the invitation."""

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

    async def execute(self, request: AcceptTermsRequest) -> Result[AcceptTermsResponse]:
        with logfire.span("accept_terms.execute", via_token=request.token is not None):
            contact = await resolve_contact(
                request,
                self.invitation_service,
                self.account_repository,
                self.contact_repository,
            )
            if isinstance(contact, Err):
                return contact

            accepted = await self.onboarding_gate.accept(
                contact.value.company_id,
                contact.value.id,
                request.contact_name or contact.value.full_name,
                token=request.token,
            )
            if isinstance(accepted, Err):
                return accepted

            return Ok(
                AcceptTermsResponse(
                    company=CompanyView.from_company(accepted.value.company),
                    invitation_consumed=accepted.value.invitation_consumed,
                )
            )
