"""Views and access checks shared by the use cases."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from onboard.domain.model import Company, Invitation, UserAccount
from onboard.domain.repository import AccountRepository
from onboard.domain.value import (
    AccountId,
    AccountType,
    Err,
    ErrorKind,
    InvitationKind,
    InvitationStatus,
    OnboardingState,
    Ok,
    Result,
    TeamRole,
)


class InvitationItem(BaseModel):
    """Invitation as shown to staff."""

    invitation_id: str
    kind: InvitationKind
    status: InvitationStatus
    invitation_url: str
    company_id: str | None = None
    contact_id: str | None = None
    workspace_id: str | None = None
    email: str | None = None
    role: TeamRole | None = None
    created_at: datetime
    expires_at: datetime
    used_at: datetime | None = None

    @classmethod
    def from_invitation(cls, invitation: Invitation, url: str) -> "InvitationItem":
        return cls(
            invitation_id=str(invitation.id),
            kind=invitation.kind,
            status=invitation.status,
            invitation_url=url,
            company_id=str(invitation.company_id) if invitation.company_id else None,
            contact_id=str(invitation.contact_id) if invitation.contact_id else None,
            workspace_id=(
                str(invitation.workspace_id) if invitation.workspace_id else None
            ),
            email=invitation.email,
            role=invitation.role,
            created_at=invitation.created_at,
            expires_at=invitation.expires_at,
            used_at=invitation.used_at,
        )


class CompanyView(BaseModel):
    """Onboarding view of a client company."""

    company_id: str
    name: str
    legal_name: str | None
    tax_id: str | None
    fiscal_address: str | None
    terms_accepted: bool
    terms_accepted_at: datetime | None
    terms_accepted_by_name: str | None
    terms_version: str | None
    onboarding_state: OnboardingState
    missing_fields: list[str]

    @classmethod
    def from_company(cls, company: Company) -> "CompanyView":
        return cls(
            company_id=str(company.id),
            name=company.name,
            legal_name=company.legal_name,
            tax_id=company.tax_id,
            fiscal_address=company.fiscal_address,
            terms_accepted=company.terms_accepted,
            terms_accepted_at=company.terms_accepted_at,
            terms_accepted_by_name=company.terms_accepted_by_name,
            terms_version=company.terms_version,
            onboarding_state=company.onboarding_state,
            missing_fields=company.missing_fields,
        )


def parse_id(value: str, label: str) -> Optional[UUID]:
    """Parse a UUID path or body value, None if malformed."""
    try:
        return UUID(value)
    except (TypeError, ValueError):
        logfire.warn("Malformed identifier", field=label, value=str(value)[:40])
        return None


async def load_actor(
    account_repository: AccountRepository,
    actor_id: str,
    account_type: AccountType,
) -> Result[UserAccount]:
    """Load the calling account and require its type.

    Returns:
        Ok with the account, Err(UNAUTHORIZED) if it is unknown or of
        another type
    """
    parsed = parse_id(actor_id, "actor_id")
    account = (
        await account_repository.find_by_id(AccountId(parsed)) if parsed else None
    )
    if account is None or account.account_type != account_type:
        logfire.warn(
            "Caller not allowed",
            actor_id=str(actor_id),
            required=account_type.value,
            actual=account.account_type.value if account else None,
        )
        return Err(ErrorKind.UNAUTHORIZED, "Not allowed for this account")
    return Ok(account)


def invitation_of_kind(
    result: Result[Invitation], kind: InvitationKind
) -> Result[Invitation]:
    """Treat an invitation of the other kind as unknown."""
    if isinstance(result, Ok) and result.value.kind != kind:
        return Err(ErrorKind.NOT_FOUND, "Invitation not found")
    return result
