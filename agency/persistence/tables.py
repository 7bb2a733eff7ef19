"""SQLAlchemy table definitions for the agent lifecycle.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the user directory)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),  # Normalized
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("phone", String(50), nullable=True),
    Column(
        "role",
        Enum("ADMIN", "LANDLORD", "AGENT", "TENANT", name="user_role", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# AGENTS TABLE (owned by the user directory)
# ============================================================================
agents_table = Table(
    "agents",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_agents_user_id", agents_table.c.user_id, unique=True)

# ============================================================================
# INVITATION EVENTS TABLE (append-only log)
# ============================================================================
invitation_events_table = Table(
    "invitation_events",
    metadata,
    Column("id", UUID, primary_key=True),
    # Commit-order tiebreaker for events with equal issued_at
    Column("sequence", BigInteger, Identity(always=True), nullable=False, unique=True),
    Column(
        "kind",
        Enum(
            "sent",
            "account_created",
            "approved",
            name="invitation_event_kind",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("email", String(255), nullable=False),  # Normalized merge key
    Column("landlord_id", UUID, nullable=False),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("phone", String(50), nullable=True),
    Column("token", String(255), nullable=True),  # SENT only
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),  # SENT only
    Column("agent_id", UUID, nullable=True),
    Column("agent_user_id", UUID, nullable=True),
    Column("issued_at", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint(
        "kind <> 'sent' OR (token IS NOT NULL AND expires_at IS NOT NULL)",
        name="ck_invitation_events_sent_fields",
    ),
    CheckConstraint(
        "kind = 'sent' OR (agent_id IS NOT NULL AND agent_user_id IS NOT NULL)",
        name="ck_invitation_events_agent_fields",
    ),
)

Index(
    "idx_invitation_events_landlord",
    invitation_events_table.c.landlord_id,
    invitation_events_table.c.issued_at,
    invitation_events_table.c.sequence,
)
Index(
    "idx_invitation_events_email",
    invitation_events_table.c.email,
    invitation_events_table.c.issued_at,
    invitation_events_table.c.sequence,
)
Index("idx_invitation_events_agent", invitation_events_table.c.agent_id)
# Not unique: a token may be reissued once its invitation has expired
Index("idx_invitation_events_token", invitation_events_table.c.token)

# ============================================================================
# AGENT SUSPENSIONS TABLE (one row per agent, replace-on-write)
# ============================================================================
agent_suspensions_table = Table(
    "agent_suspensions",
    metadata,
    Column("agent_id", UUID, primary_key=True),
    Column("landlord_id", UUID, nullable=False),
    Column(
        "reason_code",
        Enum(
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
    Column("reason_text", Text, nullable=True),
    Column("notes", Text, nullable=True),
    Column("duration_days", Integer, nullable=False),
    Column("started_at", TIMESTAMP(timezone=True), nullable=False),
    Column("ends_at", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint("duration_days >= 1", name="ck_agent_suspensions_duration"),
    CheckConstraint(
        "reason_code <> 'OTHER' OR length(trim(reason_text)) > 0",
        name="ck_agent_suspensions_other_reason",
    ),
)
