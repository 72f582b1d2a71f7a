"""SQLAlchemy table definitions for onboarding.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

invitation_status_enum = Enum(
    "pending", "accepted", "expired", "revoked", name="invitation_status", create_type=False
)
invitation_kind_enum = Enum(
    "client_portal", "team", name="invitation_kind", create_type=False
)
account_type_enum = Enum("client", "internal", name="account_type", create_type=False)
team_role_enum = Enum("admin", "member", "viewer", name="team_role", create_type=False)

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),  # Lowercase
    Column("name", String(255), nullable=False),
    Column("password_hash", Text, nullable=True),
    Column("account_type", account_type_enum, nullable=False, server_default="internal"),
    Column(
        "contact_id",
        UUID,
        ForeignKey(
            "contacts.id",
            ondelete="SET NULL",
            use_alter=True,
            name="fk_accounts_contact_id",
        ),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_accounts_contact_id", accounts_table.c.contact_id)

# ============================================================================
# WORKSPACES TABLES
# ============================================================================
workspaces_table = Table(
    "workspaces",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column(
        "owner_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

workspace_members_table = Table(
    "workspace_members",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "workspace_id",
        UUID,
        ForeignKey("workspaces.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("role", team_role_enum, nullable=False, server_default="member"),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("workspace_id", "account_id", name="uq_workspace_member"),
)

# ============================================================================
# COMPANIES / CONTACTS TABLES
# ============================================================================
companies_table = Table(
    "companies",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "workspace_id",
        UUID,
        ForeignKey("workspaces.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("name", String(255), nullable=False),
    Column("legal_name", String(255), nullable=True),
    Column("tax_id", String(64), nullable=True),
    Column("fiscal_address", Text, nullable=True),
    Column("terms_accepted", Boolean, nullable=False, server_default="false"),
    Column("terms_accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("terms_accepted_by_id", UUID, nullable=True),  # Contact, no FK: audit value
    Column("terms_accepted_by_name", String(255), nullable=True),
    Column("terms_version", String(64), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

contacts_table = Table(
    "contacts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "company_id",
        UUID,
        ForeignKey("companies.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("full_name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_contacts_company_id", contacts_table.c.company_id)

# ============================================================================
# INVITATIONS TABLE (client portal + team)
# ============================================================================
# No cascading deletes: invitations only reference their target and are
# retained for audit after expiry or revocation.
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("kind", invitation_kind_enum, nullable=False),
    Column("token", String(255), nullable=False, unique=True),
    Column("status", invitation_status_enum, nullable=False, server_default="pending"),
    Column("invited_by", UUID, nullable=True),
    Column("company_id", UUID, nullable=True),
    Column("contact_id", UUID, nullable=True),
    Column("workspace_id", UUID, nullable=True),
    Column("email", String(255), nullable=True),
    Column("role", team_role_enum, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_invitations_company_id", invitations_table.c.company_id)
Index("idx_invitations_workspace_id", invitations_table.c.workspace_id)

# Partial unique indexes: one pending invitation per target
Index(
    "uq_invitations_pending_client_target",
    invitations_table.c.company_id,
    invitations_table.c.contact_id,
    unique=True,
    postgresql_where=invitations_table.c.status == "pending",
)
Index(
    "uq_invitations_pending_team_target",
    invitations_table.c.workspace_id,
    func.lower(invitations_table.c.email),
    unique=True,
    postgresql_where=invitations_table.c.status == "pending",
)
