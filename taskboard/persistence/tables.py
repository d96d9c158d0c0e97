"""SQLAlchemy table definitions for Taskboard.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

Users live in the identity service, so user ids are plain UUID columns
without foreign keys.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("owner_id", UUID, nullable=False),
    Column("invite_token", String(255), nullable=True),  # Standing share link
    Column("invite_token_created_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_projects_owner_id", projects_table.c.owner_id)
Index("idx_projects_invite_token", projects_table.c.invite_token, unique=True)

# ============================================================================
# PROJECT MEMBERS TABLE
# ============================================================================
# The owner is implied by projects.owner_id and never stored here.
project_members_table = Table(
    "project_members",
    metadata,
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("user_id", UUID, primary_key=True),
    Column(
        "role",
        Enum("owner", "editor", "viewer", name="member_role", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_project_members_user_id", project_members_table.c.user_id)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(320), nullable=False),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("token", String(255), nullable=False),
    Column("invited_by", UUID, nullable=False),
    Column(
        "status",
        Enum("pending", "accepted", "revoked", name="invite_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("accepted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("accepted_by", UUID, nullable=True),
)

Index("idx_invites_token", invites_table.c.token, unique=True)
Index("idx_invites_project_status", invites_table.c.project_id, invites_table.c.status)

# ============================================================================
# TASKS TABLE
# ============================================================================
tasks_table = Table(
    "tasks",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(500), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "priority",
        Enum("Low", "Medium", "High", name="task_priority", create_type=False),
        nullable=False,
        server_default="Low",
    ),
    Column("due_date", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "tags",
        postgresql.ARRAY(String(100)),
        nullable=False,
        server_default="{}",
    ),
    Column("completed", Boolean, nullable=False, server_default="false"),
    Column("completed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("owner_id", UUID, nullable=False),
    Column(
        "project_id",
        UUID,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "completed OR completed_at IS NULL", name="check_completed_at_when_done"
    ),
)

Index("idx_tasks_owner_id", tasks_table.c.owner_id)
Index("idx_tasks_project_id", tasks_table.c.project_id)
Index("idx_tasks_created_at", tasks_table.c.created_at.desc())
