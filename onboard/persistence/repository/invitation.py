"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from onboard.domain.error import DuplicateActiveInvitationError, TokenCollisionError
from onboard.domain.model import Invitation
from onboard.domain.repository import InvitationRepository
from onboard.domain.value import (
    CompanyId,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationTarget,
    InvitationToken,
    WorkspaceId,
)
from onboard.persistence.mappers import invitation_to_dict, row_to_invitation
from onboard.persistence.tables import invitations_table

from ._constraint import violated

TOKEN_CONSTRAINT = "invitations_token_key"
PENDING_TARGET_CONSTRAINTS = (
    "uq_invitations_pending_client_target",
    "uq_invitations_pending_team_target",
)


def _target_clause(target: InvitationTarget) -> Any:
    if target.kind == InvitationKind.CLIENT_PORTAL:
        return and_(
            invitations_table.c.kind == InvitationKind.CLIENT_PORTAL.value,
            invitations_table.c.company_id == target.company_id,
            invitations_table.c.contact_id == target.contact_id,
        )
    return and_(
        invitations_table.c.kind == InvitationKind.TEAM.value,
        invitations_table.c.workspace_id == target.workspace_id,
        func.lower(invitations_table.c.email) == target.email,
    )


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        stmt = select(invitations_table).where(invitations_table.c.token == token.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_active(
        self, target: InvitationTarget, now: datetime
    ) -> Optional[Invitation]:
        stmt = select(invitations_table).where(
            and_(
                _target_clause(target),
                invitations_table.c.status == InvitationStatus.PENDING.value,
                invitations_table.c.expires_at > now,
            )
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def create(self, invitation: Invitation) -> Invitation:
        """Insert a new invitation inside a savepoint.

        The savepoint keeps the request transaction usable when a unique
        index rejects the row, so the caller can retry with a new token.

        Raises:
            TokenCollisionError: If the token is already taken
            DuplicateActiveInvitationError: If the target already has a
                pending invitation
        """
        stmt = insert(invitations_table).values(**invitation_to_dict(invitation))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if violated(e, TOKEN_CONSTRAINT):
                raise TokenCollisionError(invitation.token.redacted) from e
            if any(violated(e, name) for name in PENDING_TARGET_CONSTRAINTS):
                raise DuplicateActiveInvitationError(
                    invitation.target.describe()
                ) from e
            raise
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
        """Single UPDATE ... WHERE status = expected ... RETURNING."""
        conditions = [
            invitations_table.c.id == invitation_id,
            invitations_table.c.status == expected.value,
        ]
        if valid_at is not None:
            conditions.append(invitations_table.c.expires_at > valid_at)
        if company_id is not None:
            conditions.append(invitations_table.c.company_id == company_id)

        values: dict[str, Any] = {"status": status.value}
        if used_at is not None:
            values["used_at"] = used_at

        stmt = (
            update(invitations_table)
            .where(and_(*conditions))
            .values(**values)
            .returning(invitations_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def expire_stale(self, target: InvitationTarget, now: datetime) -> int:
        stmt = (
            update(invitations_table)
            .where(
                and_(
                    _target_clause(target),
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at <= now,
                )
            )
            .values(status=InvitationStatus.EXPIRED.value)
        )
        result = await self.session.execute(stmt)
        return result.rowcount or 0

    async def find_by_company(self, company_id: CompanyId) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.kind == InvitationKind.CLIENT_PORTAL.value,
                    invitations_table.c.company_id == company_id,
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def find_by_workspace(self, workspace_id: WorkspaceId) -> list[Invitation]:
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.kind == InvitationKind.TEAM.value,
                    invitations_table.c.workspace_id == workspace_id,
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]
