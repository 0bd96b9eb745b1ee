"""create_auth_tables

Revision ID: 3f1c9a2e7b10
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2e7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(mutable: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create users, refresh_tokens, one_time_secrets and audit_logs."""
    op.create_table(
        "users",
        *_timestamps(),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Lower-cased email address (unique)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt password hash (NEVER plaintext)",
        ),
        sa.Column(
            "phone",
            sa.String(length=32),
            nullable=True,
            comment="E.164 phone number for step-up codes",
        ),
        sa.Column(
            "is_active",
            sa.Boolean(),
            nullable=False,
            comment="Inactive accounts cannot log in",
        ),
        sa.Column(
            "is_step_up_enabled",
            sa.Boolean(),
            nullable=False,
            comment="Login requires a one-time code",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "refresh_tokens",
        *_timestamps(),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "revoked_reason",
            sa.Text(),
            nullable=True,
            comment="logout or password_reset",
        ),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        op.f("ix_refresh_tokens_user_id"), "refresh_tokens", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_refresh_tokens_token_hash"),
        "refresh_tokens",
        ["token_hash"],
        unique=True,
    )
    op.create_index(
        op.f("ix_refresh_tokens_expires_at"),
        "refresh_tokens",
        ["expires_at"],
        unique=False,
    )

    op.create_table(
        "one_time_secrets",
        *_timestamps(),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=False,
            comment="User the secret was issued to",
        ),
        sa.Column(
            "purpose",
            sa.String(length=32),
            nullable=False,
            comment="login_2fa, enable_2fa or forgot_password",
        ),
        sa.Column(
            "secret_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hash (codes) or SHA-256 digest (reset tokens)",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Secret expiry",
        ),
        sa.Column(
            "used_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Set when the secret is consumed",
        ),
        sa.Column(
            "attempts",
            sa.Integer(),
            server_default="0",
            nullable=False,
            comment="Failed verification attempts",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index(
        op.f("ix_one_time_secrets_secret_hash"),
        "one_time_secrets",
        ["secret_hash"],
        unique=False,
    )
    op.create_index(
        "ix_one_time_secrets_lookup",
        "one_time_secrets",
        ["user_id", "purpose", "created_at"],
        unique=False,
    )

    op.create_table(
        "audit_logs",
        *_timestamps(mutable=False),
        sa.Column(
            "action",
            sa.String(length=64),
            nullable=False,
            comment="Event name (AuditAction value)",
        ),
        sa.Column(
            "user_id",
            sa.Uuid(),
            nullable=True,
            comment="Affected user (NULL before identity is resolved)",
        ),
        sa.Column(
            "resource_type",
            sa.String(length=32),
            nullable=False,
            comment="user, session, token or secret",
        ),
        sa.Column(
            "resource_id",
            sa.Uuid(),
            nullable=True,
            comment="Specific resource identifier",
        ),
        sa.Column(
            "success",
            sa.Boolean(),
            nullable=False,
            comment="Outcome of the action",
        ),
        sa.Column(
            "ip_address",
            sa.String(length=45),
            nullable=True,
            comment="Client IP address",
        ),
        sa.Column(
            "user_agent",
            sa.Text(),
            nullable=True,
            comment="Client user agent",
        ),
        sa.Column(
            "context",
            sa.JSON(),
            nullable=True,
            comment="Structured event metadata",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_audit_logs_action"), "audit_logs", ["action"], unique=False
    )
    op.create_index(
        op.f("ix_audit_logs_user_id"), "audit_logs", ["user_id"], unique=False
    )
    op.create_index(
        "ix_audit_logs_user_action",
        "audit_logs",
        ["user_id", "action"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all auth tables."""
    op.drop_index("ix_audit_logs_user_action", table_name="audit_logs")
    op.drop_index(op.f("ix_audit_logs_user_id"), table_name="audit_logs")
    op.drop_index(op.f("ix_audit_logs_action"), table_name="audit_logs")
    op.drop_table("audit_logs")

    op.drop_index("ix_one_time_secrets_lookup", table_name="one_time_secrets")
    op.drop_index(
        op.f("ix_one_time_secrets_secret_hash"), table_name="one_time_secrets"
    )
    op.drop_table("one_time_secrets")

    op.drop_index(op.f("ix_refresh_tokens_expires_at"), table_name="refresh_tokens")
    op.drop_index(op.f("ix_refresh_tokens_token_hash"), table_name="refresh_tokens")
    op.drop_index(op.f("ix_refresh_tokens_user_id"), table_name="refresh_tokens")
    op.drop_table("refresh_tokens")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
