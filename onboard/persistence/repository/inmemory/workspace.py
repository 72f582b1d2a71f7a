"""In-memory workspace repository for testing."""

from typing import Optional

from onboard.domain.model.workspace import Workspace, WorkspaceMember
from onboard.domain.repository.workspace import WorkspaceRepository
from onboard.domain.value import AccountId, WorkspaceId, normalize_email

from .store import InMemoryStore


class InMemoryWorkspaceRepository(WorkspaceRepository):
    """In-memory implementation of WorkspaceRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        return self.store.workspaces.get(workspace_id)

    async def count_members(self, workspace_id: WorkspaceId) -> int:
        return sum(1 for m in self.store.members if m.workspace_id == workspace_id)

    async def has_member_with_email(self, workspace_id: WorkspaceId, email: str) -> bool:
        email = normalize_email(email)
        workspace = self.store.workspaces.get(workspace_id)
        if workspace is None:
            return False

        account_ids = {workspace.owner_id}
        account_ids.update(
            m.account_id for m in self.store.members if m.workspace_id == workspace_id
        )
        return any(
            account.email == email
            for account_id, account in self.store.accounts.items()
            if account_id in account_ids
        )

    async def add_member(self, member: WorkspaceMember) -> WorkspaceMember:
        existing = await self.find_member(member.workspace_id, member.account_id)
        if existing is not None:
            return existing
        self.store.members.append(member)
        return member

    async def find_member(
        self, workspace_id: WorkspaceId, account_id: AccountId
    ) -> Optional[WorkspaceMember]:
        for member in self.store.members:
            if member.workspace_id == workspace_id and member.account_id == account_id:
                return member
        return None
