"""Issue client portal invitation use case."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.application.usecase.common import InvitationItem, load_actor, parse_id
from onboard.domain.repository import (
    AccountRepository,
    CompanyRepository,
    ContactRepository,
)
from onboard.domain.service import InvitationService, invitation_link
from onboard.domain.value import (
    AccountType,
    CompanyId,
    ContactId,
    Err,
    ErrorKind,
    InvitationNotice,
    InvitationTarget,
    Ok,
    Result,
)


class IssueClientInvitationRequest(BaseModel):
    """Invite a company contact to the client portal."""

    actor_id: str
    company_id: str
    contact_id: str


class IssueClientInvitationUseCase(BaseUseCase):
    """Staff action: send a contact the link to onboard their company."""

    def __init__(
        self,
        invitation_service: InvitationService,
        account_repository: AccountRepository,
        company_repository: CompanyRepository,
        contact_repository: ContactRepository,
        frontend_url: str,
    ) -> None:
        self.invitation_service = invitation_service
        self.account_repository = account_repository
        self.company_repository = company_repository
        self.contact_repository = contact_repository
        self.frontend_url = frontend_url

    async def execute(
        self, request: IssueClientInvitationRequest
    ) -> Result[InvitationItem]:
        with logfire.span(
            "issue_client_invitation.execute",
            company_id=request.company_id,
            contact_id=request.contact_id,
        ):
            actor = await load_actor(
                self.account_repository, request.actor_id, AccountType.INTERNAL
            )
            if isinstance(actor, Err):
                return actor

            company_uuid = parse_id(request.company_id, "company_id")
            contact_uuid = parse_id(request.contact_id, "contact_id")
            company = (
                await self.company_repository.find_by_id(CompanyId(company_uuid))
                if company_uuid
                else None
            )
            if company is None:
                return Err(ErrorKind.NOT_FOUND, "Company not found")

            contact = (
                await self.contact_repository.find_by_id(ContactId(contact_uuid))
                if contact_uuid
                else None
            )
            if contact is None:
                return Err(ErrorKind.NOT_FOUND, "Contact not found")
            if contact.company_id != company.id:
                logfire.warn(
                    "Contact does not belong to company",
                    company_id=str(company.id),
                    contact_id=str(contact.id),
                )
                return Err(
                    ErrorKind.INVALID_INPUT, "The contact does not belong to this company"
                )

            issued = await self.invitation_service.issue(
                InvitationTarget.client(company.id, contact.id),
                InvitationNotice(
                    to=contact.email,
                    recipient_name=contact.full_name,
                    organisation_name=company.name,
                ),
                invited_by=actor.value.id,
            )
            if isinstance(issued, Err):
                return issued

            invitation = issued.value
            return Ok(
                InvitationItem.from_invitation(
                    invitation, invitation_link(self.frontend_url, invitation)
                )
            )
