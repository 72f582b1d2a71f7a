"""Domain value objects for onboarding."""

from onboard.domain.value.identifiers import (
    AccountId,
    CompanyId,
    ContactId,
    InvitationId,
    WorkspaceId,
    WorkspaceMemberId,
)
from onboard.domain.value.result import Err, ErrorKind, Ok, Result
from onboard.domain.value.types import (
    REQUIRED_COMPANY_FIELDS,
    AccountType,
    CompanyData,
    InvitationKind,
    InvitationNotice,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    OnboardingState,
    TeamRole,
    TermsAcceptance,
    normalize_email,
)

__all__ = [
    # Identifiers
    "AccountId",
    "CompanyId",
    "ContactId",
    "InvitationId",
    "WorkspaceId",
    "WorkspaceMemberId",
    # Results
    "Err",
    "ErrorKind",
    "Ok",
    "Result",
    # Types
    "REQUIRED_COMPANY_FIELDS",
    "AccountType",
    "CompanyData",
    "InvitationKind",
    "InvitationNotice",
    "InvitationStatus",
    "InvitationTarget",
    "InvitationToken",
    "OnboardingState",
    "TeamRole",
    "TermsAcceptance",
    "normalize_email",
]
