"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from onboard.domain.model import (
    Company,
    Contact,
    Invitation,
    UserAccount,
    Workspace,
    WorkspaceMember,
)
from onboard.domain.value import (
    AccountId,
    AccountType,
    CompanyId,
    ContactId,
    InvitationId,
    InvitationKind,
    InvitationStatus,
    InvitationToken,
    TeamRole,
    WorkspaceId,
    WorkspaceMemberId,
)


def _uuid(value: Any) -> Optional[UUID]:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    invited_by = _uuid(row.get("invited_by"))
    company_id = _uuid(row.get("company_id"))
    contact_id = _uuid(row.get("contact_id"))
    workspace_id = _uuid(row.get("workspace_id"))
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        kind=InvitationKind(row["kind"]),
        token=InvitationToken(row["token"]),
        status=InvitationStatus(row["status"]),
        invited_by=AccountId(invited_by) if invited_by else None,
        company_id=CompanyId(company_id) if company_id else None,
        contact_id=ContactId(contact_id) if contact_id else None,
        workspace_id=WorkspaceId(workspace_id) if workspace_id else None,
        email=row.get("email"),
        role=TeamRole(row["role"]) if row.get("role") else None,
        created_at=row["created_at"],
        expires_at=row["expires_at"],
        used_at=row.get("used_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    """Convert Invitation domain model to database dict."""
    return {
        "id": invitation.id,
        "kind": invitation.kind.value,
        "token": invitation.token.root,
        "status": invitation.status.value,
        "invited_by": invitation.invited_by,
        "company_id": invitation.company_id,
        "contact_id": invitation.contact_id,
        "workspace_id": invitation.workspace_id,
        "email": invitation.email,
        "role": invitation.role.value if invitation.role else None,
        "created_at": invitation.created_at,
        "expires_at": invitation.expires_at,
        "used_at": invitation.used_at,
    }


def row_to_company(row: Dict[str, Any]) -> Company:
    """Convert database row to Company domain model."""
    workspace_id = _uuid(row.get("workspace_id"))
    accepted_by = _uuid(row.get("terms_accepted_by_id"))
    return Company(
        id=CompanyId(_uuid(row["id"])),
        workspace_id=WorkspaceId(workspace_id) if workspace_id else None,
        name=row["name"],
        legal_name=row.get("legal_name"),
        tax_id=row.get("tax_id"),
        fiscal_address=row.get("fiscal_address"),
        terms_accepted=row["terms_accepted"],
        terms_accepted_at=row.get("terms_accepted_at"),
        terms_accepted_by_id=ContactId(accepted_by) if accepted_by else None,
        terms_accepted_by_name=row.get("terms_accepted_by_name"),
        terms_version=row.get("terms_version"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_contact(row: Dict[str, Any]) -> Contact:
    """Convert database row to Contact domain model."""
    return Contact(
        id=ContactId(_uuid(row["id"])),
        company_id=CompanyId(_uuid(row["company_id"])),
        full_name=row["full_name"],
        email=row["email"],
        created_at=row["created_at"],
    )


def row_to_account(row: Dict[str, Any]) -> UserAccount:
    """Convert database row to UserAccount domain model."""
    contact_id = _uuid(row.get("contact_id"))
    return UserAccount(
        id=AccountId(_uuid(row["id"])),
        email=row["email"],
        name=row["name"],
        password_hash=row.get("password_hash"),
        account_type=AccountType(row["account_type"]),
        contact_id=ContactId(contact_id) if contact_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: UserAccount) -> Dict[str, Any]:
    """Convert UserAccount domain model to database dict."""
    data = account.model_dump()
    data["account_type"] = account.account_type.value
    return data


def row_to_workspace(row: Dict[str, Any]) -> Workspace:
    """Convert database row to Workspace domain model."""
    return Workspace(
        id=WorkspaceId(_uuid(row["id"])),
        name=row["name"],
        owner_id=AccountId(_uuid(row["owner_id"])),
        created_at=row["created_at"],
    )


def row_to_workspace_member(row: Dict[str, Any]) -> WorkspaceMember:
    """Convert database row to WorkspaceMember domain model."""
    return WorkspaceMember(
        id=WorkspaceMemberId(_uuid(row["id"])),
        workspace_id=WorkspaceId(_uuid(row["workspace_id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        role=TeamRole(row["role"]),
        joined_at=row["joined_at"],
    )


def workspace_member_to_dict(member: WorkspaceMember) -> Dict[str, Any]:
    """Convert WorkspaceMember domain model to database dict."""
    data = member.model_dump()
    data["role"] = member.role.value
    return data
