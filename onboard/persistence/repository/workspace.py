"""PostgreSQL implementation of Workspace repository."""

from typing import Optional

from sqlalchemy import and_, exists, func, or_, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from onboard.domain.model import Workspace, WorkspaceMember
from onboard.domain.repository import WorkspaceRepository
from onboard.domain.value import AccountId, WorkspaceId, normalize_email
from onboard.persistence.mappers import (
    row_to_workspace,
    row_to_workspace_member,
    workspace_member_to_dict,
)
from onboard.persistence.tables import (
    accounts_table,
    workspace_members_table,
    workspaces_table,
)


class PostgresWorkspaceRepository(WorkspaceRepository):
    """PostgreSQL implementation of WorkspaceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, workspace_id: WorkspaceId) -> Optional[Workspace]:
        stmt = select(workspaces_table).where(workspaces_table.c.id == workspace_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace(dict(row)) if row else None

    async def count_members(self, workspace_id: WorkspaceId) -> int:
        stmt = (
            select(func.count())
            .select_from(workspace_members_table)
            .where(workspace_members_table.c.workspace_id == workspace_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def has_member_with_email(self, workspace_id: WorkspaceId, email: str) -> bool:
        email = normalize_email(email)
        is_member = exists().where(
            and_(
                workspace_members_table.c.workspace_id == workspace_id,
                workspace_members_table.c.account_id == accounts_table.c.id,
            )
        )
        is_owner = exists().where(
            and_(
                workspaces_table.c.id == workspace_id,
                workspaces_table.c.owner_id == accounts_table.c.id,
            )
        )
        stmt = select(accounts_table.c.id).where(
            and_(accounts_table.c.email == email, or_(is_member, is_owner))
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add_member(self, member: WorkspaceMember) -> WorkspaceMember:
        stmt = (
            pg_insert(workspace_members_table)
            .values(**workspace_member_to_dict(member))
            .on_conflict_do_nothing(constraint="uq_workspace_member")
        )
        await self.session.execute(stmt)
        stored = await self.find_member(member.workspace_id, member.account_id)
        return stored or member

    async def find_member(
        self, workspace_id: WorkspaceId, account_id: AccountId
    ) -> Optional[WorkspaceMember]:
        stmt = select(workspace_members_table).where(
            and_(
                workspace_members_table.c.workspace_id == workspace_id,
                workspace_members_table.c.account_id == account_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_workspace_member(dict(row)) if row else None
