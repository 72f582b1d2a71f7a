"""Get portal company use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import CompanyView
from onboard.application.usecase.onboarding.access import portal_contact
from onboard.domain.repository import (
    AccountRepository,
    CompanyRepository,
    ContactRepository,
)
from onboard.domain.value import Err, ErrorKind, Ok, Result


class GetPortalCompanyRequest(BaseModel):
    account_id: str


class GetPortalCompanyUseCase(BaseUseCase):
    """Company of the signed-in portal client."""

    def __init__(
        self,
        account_repository: AccountRepository,
        contact_repository: ContactRepository,
        company_repository: CompanyRepository,
    ) -> None:
        self.account_repository = account_repository
        self.contact_repository = contact_repository
        self.company_repository = company_repository

    async def execute(self, request: GetPortalCompanyRequest) -> Result[CompanyView]:
        with logfire.span("get_portal_company.execute", account_id=request.account_id):
            contact = await portal_contact(
                self.account_repository, self.contact_repository, request.account_id
            )
            if isinstance(contact, Err):
                return contact

            company = await self.company_repository.find_by_id(contact.value.company_id)
            if company is None:
                return Err(ErrorKind.NOT_FOUND, "Company not found")
            return Ok(CompanyView.from_company(company))
