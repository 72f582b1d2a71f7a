"""Workspace and membership entities used by team invitations."""

from datetime import datetime

from pydantic import Field

from onboard.domain.model.common import DomainModel, utcnow
from onboard.domain.value import AccountId, TeamRole, WorkspaceId, WorkspaceMemberId


class Workspace(DomainModel):
    """Workspace owned by one internal account."""

    id: WorkspaceId
    name: str
    owner_id: AccountId
    created_at: datetime = Field(default_factory=utcnow)


class WorkspaceMember(DomainModel):
    """Membership of an internal account in a workspace (owner excluded)."""

    id: WorkspaceMemberId
    workspace_id: WorkspaceId
    account_id: AccountId
    role: TeamRole = TeamRole.MEMBER
    joined_at: datetime = Field(default_factory=utcnow)
