"""Invitation repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from onboard.domain.model.invitation import Invitation
from onboard.domain.value import (
    CompanyId,
    InvitationId,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    WorkspaceId,
)


class InvitationRepository(ABC):
    """Repository for Invitation entity.

    Defines the contract for invitation persistence operations.
    Status transitions are atomic conditional writes that only apply when
    the stored row still matches the expected state, so a concurrent
    transition can never be overwritten.
    """

    @abstractmethod
    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID.

        Args:
            invitation_id: The invitation's unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by token.

        Used whenever the invitee opens or submits the invitation link.

        Args:
            token: The invitation token

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_active(
        self, target: InvitationTarget, now: datetime
    ) -> Optional[Invitation]:
        """Find the pending, non-expired invitation for a target.

        Args:
            target: Invitation addressing scheme
            now: Reference time for the expiry comparison

        Returns:
            The active invitation if one exists, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation.

        Args:
            invitation: The invitation to insert

        Returns:
            The stored invitation

        Raises:
            TokenCollisionError: If the token is already taken
            DuplicateActiveInvitationError: If a pending invitation exists for
                the same target
        """
        pass

    @abstractmethod
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
        """Atomically move an invitation from one status to another.

        The write is a single conditional update: it applies only if the
        stored status equals ``expected`` and, when given, the invitation has
        not expired at ``valid_at`` and belongs to ``company_id``.

        Args:
            invitation_id: Invitation to update
            expected: Status the row must currently have
            status: New status
            used_at: Consumption timestamp to record
            valid_at: If set, require expires_at > valid_at
            company_id: If set, require the invitation to target this company

        Returns:
            The updated invitation, None if the guard did not match
        """
        pass

    @abstractmethod
    async def expire_stale(self, target: InvitationTarget, now: datetime) -> int:
        """Mark pending invitations of a target that are past expiry as EXPIRED.

        Args:
            target: Invitation addressing scheme
            now: Reference time

        Returns:
            Number of invitations transitioned
        """
        pass

    @abstractmethod
    async def find_by_company(self, company_id: CompanyId) -> list[Invitation]:
        """List client portal invitations of a company, newest first."""
        pass

    @abstractmethod
    async def find_by_workspace(self, workspace_id: WorkspaceId) -> list[Invitation]:
        """List team invitations of a workspace, newest first."""
        pass
