"""initial_schema

Create the schema for agent onboarding:
- Users and agents (user directory)
- Invitation events (append-only log; invitation state is derived on read)
- Agent suspensions (one row per suspended agent, replace-on-write)

Revision ID: 3c41d9a7e2b5
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41d9a7e2b5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('ADMIN', 'LANDLORD', 'AGENT', 'TENANT');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE invitation_event_kind AS ENUM (
                'sent', 'account_created', 'approved'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE suspension_reason AS ENUM (
                'TERMINATING_CONTRACT',
                'POOR_PERFORMANCE',
                'VIOLATION_OF_TERMS',
                'BREACH_OF_CONTRACT',
                'MUTUAL_AGREEMENT',
                'OTHER'
            );
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),  # Normalized
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column(
            "role",
            postgresql.ENUM(
                "ADMIN",
                "LANDLORD",
                "AGENT",
                "TENANT",
                name="user_role",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # AGENTS table
    # ========================================================================
    op.create_table(
        "agents",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_agents_user_id", "agents", ["user_id"], unique=True)

    # ========================================================================
    # INVITATION_EVENTS table (append-only)
    # ========================================================================
    op.create_table(
        "invitation_events",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "sequence", sa.BigInteger(), sa.Identity(always=True), nullable=False
        ),
        sa.Column(
            "kind",
            postgresql.ENUM(
                "sent",
                "account_created",
                "approved",
                name="invitation_event_kind",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("landlord_id", sa.UUID(), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("token", sa.String(255), nullable=True),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("agent_id", sa.UUID(), nullable=True),
        sa.Column("agent_user_id", sa.UUID(), nullable=True),
        sa.Column("issued_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("sequence", name="uq_invitation_events_sequence"),
        # Business rule: only SENT carries a token and expiry
        sa.CheckConstraint(
            "kind <> 'sent' OR (token IS NOT NULL AND expires_at IS NOT NULL)",
            name="ck_invitation_events_sent_fields",
        ),
        # Business rule: account and approval events link the agent
        sa.CheckConstraint(
            "kind = 'sent' OR (agent_id IS NOT NULL AND agent_user_id IS NOT NULL)",
            name="ck_invitation_events_agent_fields",
        ),
    )
    op.create_index(
        "idx_invitation_events_landlord",
        "invitation_events",
        ["landlord_id", "issued_at", "sequence"],
    )
    op.create_index(
        "idx_invitation_events_email",
        "invitation_events",
        ["email", "issued_at", "sequence"],
    )
    op.create_index("idx_invitation_events_agent", "invitation_events", ["agent_id"])
    op.create_index("idx_invitation_events_token", "invitation_events", ["token"])

    # Append-only: reject updates and deletes
    op.execute("""
        CREATE OR REPLACE FUNCTION reject_invitation_event_change()
        RETURNS TRIGGER AS $$
        BEGIN
            RAISE EXCEPTION 'invitation_events is append-only';
        END;
        $$ LANGUAGE plpgsql;
    """)

    op.execute("""
        CREATE TRIGGER invitation_events_append_only
        BEFORE UPDATE OR DELETE ON invitation_events
        FOR EACH ROW
        EXECUTE FUNCTION reject_invitation_event_change();
    """)

    # ========================================================================
    # AGENT_SUSPENSIONS table
    # ========================================================================
    op.create_table(
        "agent_suspensions",
        sa.Column("agent_id", sa.UUID(), nullable=False),
        sa.Column("landlord_id", sa.UUID(), nullable=False),
        sa.Column(
            "reason_code",
            postgresql.ENUM(
                "TERMINATING_CONTRACT",
                "POOR_PERFORMANCE",
                "VIOLATION_OF_TERMS",
                "BREACH_OF_CONTRACT",
                "MUTUAL_AGREEMENT",
                "OTHER",
                name="suspension_reason",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("reason_text", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("duration_days", sa.Integer(), nullable=False),
        sa.Column("started_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("ends_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("agent_id"),
        sa.CheckConstraint(
            "duration_days >= 1", name="ck_agent_suspensions_duration"
        ),
        sa.CheckConstraint(
            "reason_code <> 'OTHER' OR length(trim(reason_text)) > 0",
            name="ck_agent_suspensions_other_reason",
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute(
        "DROP TRIGGER IF EXISTS invitation_events_append_only ON invitation_events"
    )

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS reject_invitation_event_change()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("agent_suspensions")
    op.drop_table("invitation_events")
    op.drop_table("agents")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS suspension_reason")
    op.execute("DROP TYPE IF EXISTS invitation_event_kind")
    op.execute("DROP TYPE IF EXISTS user_role")
