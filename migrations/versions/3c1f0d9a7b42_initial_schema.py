"""initial_schema

Create the onboarding schema:
- Accounts (internal staff and client portal users)
- Workspaces and their members
- Companies and their contacts (the client CRM records)
- Invitations (client portal links and team invitations)

Revision ID: 3c1f0d9a7b42
Revises:
Create Date: 2026-01-12 10:14:03.518220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d9a7b42"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUMS = {
    "invitation_status": ("pending", "accepted", "expired", "revoked"),
    "invitation_kind": ("client_portal", "team"),
    "account_type": ("client", "internal"),
    "team_role": ("admin", "member", "viewer"),
}


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _enum(name: str) -> sa.Enum:
    # Types are created up front; tables only reference them
    return postgresql.ENUM(*ENUMS[name], name=name, create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUMS.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # ACCOUNTS table (FK to contacts added once contacts exists)
    # ========================================================================
    op.create_table(
        "accounts",
        _uuid_pk(),
        sa.Column("email", sa.String(255), nullable=False),  # Lowercase
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column(
            "account_type",
            _enum("account_type"),
            nullable=False,
            server_default="internal",
        ),
        sa.Column("contact_id", sa.UUID(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="accounts_email_key"),
    )
    op.create_index("idx_accounts_contact_id", "accounts", ["contact_id"])

    # ========================================================================
    # WORKSPACES / WORKSPACE_MEMBERS tables
    # ========================================================================
    op.create_table(
        "workspaces",
        _uuid_pk(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_id"], ["accounts.id"], ondelete="CASCADE"),
    )

    op.create_table(
        "workspace_members",
        _uuid_pk(),
        sa.Column("workspace_id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column(
            "role", _enum("team_role"), nullable=False, server_default="member"
        ),
        _timestamp("joined_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["workspace_id"], ["workspaces.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("workspace_id", "account_id", name="uq_workspace_member"),
    )

    # ========================================================================
    # COMPANIES / CONTACTS tables
    # ========================================================================
    op.create_table(
        "companies",
        _uuid_pk(),
        sa.Column("workspace_id", sa.UUID(), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("legal_name", sa.String(255), nullable=True),
        sa.Column("tax_id", sa.String(64), nullable=True),
        sa.Column("fiscal_address", sa.Text(), nullable=True),
        sa.Column(
            "terms_accepted", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("terms_accepted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("terms_accepted_by_id", sa.UUID(), nullable=True),
        sa.Column("terms_accepted_by_name", sa.String(255), nullable=True),
        sa.Column("terms_version", sa.String(64), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["workspace_id"], ["workspaces.id"], ondelete="SET NULL"
        ),
    )

    op.create_table(
        "contacts",
        _uuid_pk(),
        sa.Column("company_id", sa.UUID(), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
    )
    op.create_index("idx_contacts_company_id", "contacts", ["company_id"])

    op.create_foreign_key(
        "fk_accounts_contact_id",
        "accounts",
        "contacts",
        ["contact_id"],
        ["id"],
        ondelete="SET NULL",
    )

    # ========================================================================
    # INVITATIONS table (no FKs: rows outlive their targets for audit)
    # ========================================================================
    op.create_table(
        "invitations",
        _uuid_pk(),
        sa.Column("kind", _enum("invitation_kind"), nullable=False),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column(
            "status",
            _enum("invitation_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("invited_by", sa.UUID(), nullable=True),
        sa.Column("company_id", sa.UUID(), nullable=True),
        sa.Column("contact_id", sa.UUID(), nullable=True),
        sa.Column("workspace_id", sa.UUID(), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("role", _enum("team_role"), nullable=True),
        _timestamp("created_at"),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("used_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="invitations_token_key"),
    )
    op.create_index("idx_invitations_company_id", "invitations", ["company_id"])
    op.create_index("idx_invitations_workspace_id", "invitations", ["workspace_id"])

    # At most one pending invitation per target
    op.create_index(
        "uq_invitations_pending_client_target",
        "invitations",
        ["company_id", "contact_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )
    op.create_index(
        "uq_invitations_pending_team_target",
        "invitations",
        ["workspace_id", sa.text("lower(email)")],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("invitations")
    op.drop_constraint("fk_accounts_contact_id", "accounts", type_="foreignkey")
    op.drop_table("contacts")
    op.drop_table("companies")
    op.drop_table("workspace_members")
    op.drop_table("workspaces")
    op.drop_table("accounts")

    for name in ENUMS:
        op.execute(f"DROP TYPE IF EXISTS {name}")
