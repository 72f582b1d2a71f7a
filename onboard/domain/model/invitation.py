"""Invitation entity.

Invitations are token-addressed, time-limited offers to create or link an
account. They are never deleted: expired and revoked records stay for audit.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from onboard.domain.model.common import DomainModel, utcnow
from onboard.domain.value import (
    AccountId,
    CompanyId,
    ContactId,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    TeamRole,
    WorkspaceId,
)


class Invitation(DomainModel):
    """Invitation entity - one addressing scheme per kind.

    Business rules:
    - At most one pending, non-expired invitation per target
    - Expiry is evaluated lazily, when the invitation is next read
    - PENDING is the only state with outgoing transitions
    - used_at is set only when the invitation is consumed (ACCEPTED)
    - The invitation references, but does not own, its company/contact/email
    """

    id: InvitationId
    kind: InvitationKind
    token: InvitationToken
    status: InvitationStatus = InvitationStatus.PENDING
    invited_by: Optional[AccountId] = None

    # Client portal addressing
    company_id: Optional[CompanyId] = None
    contact_id: Optional[ContactId] = None

    # Team addressing
    workspace_id: Optional[WorkspaceId] = None
    email: Optional[str] = None
    role: Optional[TeamRole] = None

    created_at: datetime = Field(default_factory=utcnow)
    expires_at: datetime
    used_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_addressing(self) -> "Invitation":
        """Re-check the addressing scheme and the team role."""
        _ = self.target  # raises if the scheme does not match the kind
        if self.kind == InvitationKind.TEAM and self.role is None:
            raise ValueError("Team invitations need a role")
        return self

    @property
    def target(self) -> InvitationTarget:
        """The addressing scheme of this invitation."""
        return InvitationTarget(
            kind=self.kind,
            company_id=self.company_id,
            contact_id=self.contact_id,
            workspace_id=self.workspace_id,
            email=self.email,
        )

    def is_past_expiry(self, now: datetime) -> bool:
        return now > self.expires_at

    def is_active(self, now: datetime) -> bool:
        """Pending and still inside its validity window."""
        return self.status == InvitationStatus.PENDING and not self.is_past_expiry(
            now
        )
