"""SQLAlchemy table definitions for Connector.

They match the schema defined in Alembic migrations. Nested entry lists
(likes, comments, experience, education) are stored as JSONB arrays on their
aggregate's row so that an aggregate is always written as a whole.
"""

from sqlalchemy import Column, ForeignKey, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("avatar", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column("likes", JSONB, nullable=False, server_default="[]"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_date", posts_table.c.date.desc())

# ============================================================================
# PROFILES TABLE (1:1 with users)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("status", String(255), nullable=False),
    Column("skills", JSONB, nullable=False),
    Column("company", String(255), nullable=True),
    Column("website", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("githubusername", String(255), nullable=True),
    Column("social", JSONB, nullable=False, server_default="{}"),
    Column("experience", JSONB, nullable=False, server_default="[]"),
    Column("education", JSONB, nullable=False, server_default="[]"),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
)
