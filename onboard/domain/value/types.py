"""Domain value objects for invitations and onboarding.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and small pieces of business logic.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import field_validator, model_validator

from onboard.domain.value.common import RootValueObject, ValueObject
from onboard.domain.value.identifiers import CompanyId, ContactId, WorkspaceId


class InvitationStatus(str, Enum):
    """Status of an invitation.

    PENDING is the only non-terminal state.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    EXPIRED = "expired"
    REVOKED = "revoked"

    @property
    def is_terminal(self) -> bool:
        return self is not InvitationStatus.PENDING


class InvitationKind(str, Enum):
    """Who an invitation is addressed to."""

    CLIENT_PORTAL = "client_portal"  # External contact of a client company
    TEAM = "team"  # Internal teammate joining a workspace


class AccountType(str, Enum):
    """Portal or internal account."""

    CLIENT = "client"
    INTERNAL = "internal"


class TeamRole(str, Enum):
    """Role granted to a teammate by a team invitation."""

    ADMIN = "admin"
    MEMBER = "member"
    VIEWER = "viewer"


class OnboardingState(str, Enum):
    """Derived onboarding state of a client company."""

    DATA_INCOMPLETE = "data_incomplete"
    DATA_COMPLETE = "data_complete"
    ACCEPTED = "accepted"


_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,255}$")
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class InvitationToken(RootValueObject[str]):
    """URL-safe opaque invitation token."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is 1-255 URL-safe characters."""
        if not _TOKEN_PATTERN.match(v):
            raise ValueError("Token must be 1-255 URL-safe characters")
        return v

    @property
    def redacted(self) -> str:
        """Token prefix safe to put in logs."""
        return self.root[:8] + "..."


def normalize_email(email: str) -> str:
    """Lowercase and strip an email address, rejecting obvious garbage."""
    normalized = email.strip().lower()
    if not _EMAIL_PATTERN.match(normalized):
        raise ValueError(f"Invalid email address: {email!r}")
    return normalized


class InvitationTarget(ValueObject):
    """Addressing scheme of an invitation.

    Client portal invitations address a (company, contact) pair, team
    invitations address an email inside a workspace. Exactly one scheme is
    populated, matching the kind.
    """

    kind: InvitationKind
    company_id: CompanyId | None = None
    contact_id: ContactId | None = None
    workspace_id: WorkspaceId | None = None
    email: str | None = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str | None:
        return normalize_email(v) if v is not None else None

    @model_validator(mode="after")
    def validate_scheme(self) -> "InvitationTarget":
        """Ensure the populated fields match the kind."""
        client_fields = (self.company_id, self.contact_id)
        team_fields = (self.workspace_id, self.email)
        if self.kind == InvitationKind.CLIENT_PORTAL:
            if None in client_fields or any(f is not None for f in team_fields):
                raise ValueError(
                    "Client portal invitations need company_id and contact_id only"
                )
        else:
            if None in team_fields or any(f is not None for f in client_fields):
                raise ValueError("Team invitations need workspace_id and email only")
        return self

    @classmethod
    def client(cls, company_id: CompanyId, contact_id: ContactId) -> "InvitationTarget":
        return cls(
            kind=InvitationKind.CLIENT_PORTAL,
            company_id=company_id,
            contact_id=contact_id,
        )

    @classmethod
    def team(cls, workspace_id: WorkspaceId, email: str) -> "InvitationTarget":
        return cls(kind=InvitationKind.TEAM, workspace_id=workspace_id, email=email)

    def describe(self) -> str:
        """Short description for logs and error messages."""
        if self.kind == InvitationKind.CLIENT_PORTAL:
            return f"company {self.company_id} / contact {self.contact_id}"
        return f"workspace {self.workspace_id} / {self.email}"


class InvitationNotice(ValueObject):
    """What the invitation e-mail needs to know about its recipient."""

    to: str
    recipient_name: str
    organisation_name: str


REQUIRED_COMPANY_FIELDS = ("legal_name", "tax_id", "fiscal_address")


class CompanyData(ValueObject):
    """Partial update of the legally required company fields.

    Omitted fields are left untouched, so each field can be saved on its own.
    """

    legal_name: str | None = None
    tax_id: str | None = None
    fiscal_address: str | None = None

    @field_validator("legal_name", "tax_id", "fiscal_address")
    @classmethod
    def strip_value(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None

    def provided_fields(self) -> dict[str, Any]:
        """Fields explicitly set by the caller."""
        return self.model_dump(exclude_none=True)


class TermsAcceptance(ValueObject):
    """The one-time, legally significant acceptance record."""

    accepted_at: datetime
    accepted_by_id: ContactId
    accepted_by_name: str
    version: str
