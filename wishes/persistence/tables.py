"""SQLAlchemy table definitions for the wishes service.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (Google accounts)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("google_id", Text, nullable=False, unique=True),
    Column("display_name", Text, nullable=False),
    Column("email", Text, nullable=True),
    Column("picture", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# WISHES TABLE
# ============================================================================
# The author is either a registered user or an anonymous session; each of them
# may own at most one wish.
wishes_table = Table(
    "wishes",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),
    Column("name", Text, nullable=True),
    Column("wish", Text, nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("session_id", Text, nullable=True),
    Column("support_count", Integer, nullable=False, server_default="0"),
    CheckConstraint("support_count >= 0", name="ck_wishes_support_count"),
    CheckConstraint(
        "user_id IS NOT NULL OR session_id IS NOT NULL", name="ck_wishes_author"
    ),
)

Index(
    "idx_wishes_user_id",
    wishes_table.c.user_id,
    unique=True,
    postgresql_where=text("user_id IS NOT NULL"),
)
Index(
    "idx_wishes_session_id",
    wishes_table.c.session_id,
    unique=True,
    postgresql_where=text("session_id IS NOT NULL"),
)
Index(
    "idx_wishes_created_at_id",
    wishes_table.c.created_at.desc(),
    wishes_table.c.id.desc(),
)

# ============================================================================
# SUPPORTS TABLE
# ============================================================================
supports_table = Table(
    "supports",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "wish_id",
        UUID(as_uuid=False),
        ForeignKey("wishes.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("session_id", Text, nullable=True),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(session_id IS NULL) <> (user_id IS NULL)", name="ck_supports_supporter"
    ),
)

# At most one support per identity per wish
Index(
    "idx_supports_wish_session",
    supports_table.c.wish_id,
    supports_table.c.session_id,
    unique=True,
    postgresql_where=text("session_id IS NOT NULL"),
)
Index(
    "idx_supports_wish_user",
    supports_table.c.wish_id,
    supports_table.c.user_id,
    unique=True,
    postgresql_where=text("user_id IS NOT NULL"),
)
Index("idx_supports_wish_id", supports_table.c.wish_id)
