"""List company invitations use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import InvitationItem, load_actor, parse_id
from onboard.domain.repository import AccountRepository, CompanyRepository
from onboard.domain.service import InvitationService, invitation_link
from onboard.domain.value import AccountType, CompanyId, Err, ErrorKind, Ok, Result


class ListCompanyInvitationsRequest(BaseModel):
    actor_id: str
    company_id: str


class ListCompanyInvitationsResponse(BaseModel):
    invitations: list[InvitationItem]


class ListCompanyInvitationsUseCase(BaseUseCase):
    """Staff view of every portal invitation sent for a company."""

    def __init__(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        company_repository: CompanyRepository,
        frontend_url: str,
    ) -> None:
        self.invitation_service = invitation_service
        self.account_repository = account_repository
        self.company_repository = company_repository
        self.frontend_url = frontend_url

    async def execute(
        self, request: ListCompanyInvitationsRequest
    ) -> Result[ListCompanyInvitationsResponse]:
        with logfire.span(
            "list_company_invitations.execute", company_id=request.company_id
        ):
            actor = await load_actor(
                self.account_repository, request.actor_id, AccountType.INTERNAL
            )
            if isinstance(actor, Err):
                return actor

            company_uuid = parse_id(request.company_id, "company_id")
            company = (
                await self.company_repository.find_by_id(CompanyId(company_uuid))
                if company_uuid
                else None
            )
            if company is None:
                return Err(ErrorKind.NOT_FOUND, "Company not found")

            invitations = await self.invitation_service.list_for_company(company.id)
            return Ok(
                ListCompanyInvitationsResponse(
                    invitations=[
                        InvitationItem.from_invitation(
                            invitation, invitation_link(self.frontend_url, invitation)
                        )
                        for invitation in invitations
                    ]
                )
            )
