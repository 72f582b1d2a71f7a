"""In-memory invitation repository for testing."""

from datetime import datetime
from typing import Optional

from onboard.domain.error import DuplicateActiveInvitationError, TokenCollisionError
from onboard.domain.model.invitation import Invitation
from onboard.domain.repository.invitation import InvitationRepository
from onboard.domain.value import (
    CompanyId,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    WorkspaceId,
)

from .store import InMemoryStore


class InMemoryInvitationRepository(InvitationRepository):
    """In-memory implementation of InvitationRepository for testing.

    Mirrors the database guarantees: unique tokens, one pending invitation
    per target, and compare-and-set status transitions.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    @property
    def _invitations(self) -> list[Invitation]:
        return self.store.invitations

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token."""
        for invitation in self._invitations:
            if invitation.token == token:
                return invitation
        return None

    async def find_active(
        self, target: InvitationTarget, now: datetime
    ) -> Optional[Invitation]:
        """Find the pending, non-expired invitation for a target."""
        for invitation in self._invitations:
            if invitation.target == target and invitation.is_active(now):
                return invitation
        return None

    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Raises:
            TokenCollisionError: If the token is already taken
            DuplicateActiveInvitationError: If the target has a pending invitation
        """
        for existing in self._invitations:
            if existing.token == invitation.token:
                raise TokenCollisionError(invitation.token.redacted)
        for existing in self._invitations:
            if (
                existing.status == InvitationStatus.PENDING
                and existing.target == invitation.target
            ):
                raise DuplicateActiveInvitationError(invitation.target.describe())

        self._invitations.append(invitation)
        return invitation

    async def transition_status(
        self,
        invitation_id: InvitationId,
        *,
        expected: InvitationStatus,
        status: InvitationStatus,
        used_at: Optional[datetime] = None,
        valid_at: Optional[datetime] = None,
        company_id: Optional[CompanyId] = None,
    ) -> Optional[Invitation]:
        """Compare-and-set the status of an invitation."""
        for i, invitation in enumerate(self._invitations):
            if invitation.id != invitation_id:
                continue
            if invitation.status != expected:
                return None
            if valid_at is not None and invitation.is_past_expiry(valid_at):
                return None
            if company_id is not None and invitation.company_id != company_id:
                return None

            update: dict = {"status": status}
            if used_at is not None:
                update["used_at"] = used_at
            updated = invitation.model_copy(update=update)
            self._invitations[i] = updated
            return updated
        return None

    async def expire_stale(self, target: InvitationTarget, now: datetime) -> int:
        """Expire pending invitations of a target that are past expiry."""
        expired = 0
        for i, invitation in enumerate(self._invitations):
            if (
                invitation.target == target
                and invitation.status == InvitationStatus.PENDING
                and invitation.is_past_expiry(now)
            ):
                self._invitations[i] = invitation.model_copy(
                    update={"status": InvitationStatus.EXPIRED}
                )
                expired += 1
        return expired

    async def find_by_company(self, company_id: CompanyId) -> list[Invitation]:
        """List client portal invitations of a company, newest first."""
        matches = [
            invitation
            for invitation in self._invitations
            if invitation.kind == InvitationKind.CLIENT_PORTAL
            and invitation.company_id == company_id
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches

    async def find_by_workspace(self, workspace_id: WorkspaceId) -> list[Invitation]:
        """List team invitations of a workspace, newest first."""
        matches = [
            invitation
            for invitation in self._invitations
            if invitation.kind == InvitationKind.TEAM
            and invitation.workspace_id == workspace_id
        ]
        matches.sort(key=lambda inv: inv.created_at, reverse=True)
        return matches
