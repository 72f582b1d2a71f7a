"""Workspace repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from onboard.domain.model.workspace import Workspace, WorkspaceMember
from onboard.domain.value import AccountId, WorkspaceId


class WorkspaceRepository(ABC):
    """Repository for workspaces and their memberships."""

    @abstractmethod
    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        """Find a workspace by ID."""
        pass

    @abstractmethod
    async def count_members(self, workspace_id: WorkspaceId) -> int:
        """Count members, owner excluded."""
        pass

    @abstractmethod
    async def has_member_with_email(self, workspace_id: WorkspaceId, email: str) -> bool:
        """Whether the owner or a member of the workspace uses this email."""
        pass

    @abstractmethod
    async def add_member(self, member: WorkspaceMember) -> WorkspaceMember:
        """Add a membership; returns the existing one if the account is already in.

        Args:
            member: Membership to add

        Returns:
            The stored membership
        """
        pass

    @abstractmethod
    async def find_member(
        self, workspace_id: WorkspaceId, account_id: AccountId
    ) -> Optional[WorkspaceMember]:
        """Find the membership of an account in a workspace."""
        pass
