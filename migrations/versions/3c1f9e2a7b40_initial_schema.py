"""initial_schema

Create the schema for the wishes service:
- Users (Google accounts)
- Wishes (one per user, one per anonymous session)
- Supports (one per identity per wish)

Revision ID: 3c1f9e2a7b40
Revises:
Create Date: 2026-10-17 10:12:04.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9e2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("google_id", sa.Text(), nullable=False),
        sa.Column("display_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("picture", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("google_id", name="uq_users_google_id"),
    )

    # ========================================================================
    # WISHES table
    # ========================================================================
    op.create_table(
        "wishes",
        sa.Column("id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("wish", sa.Text(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("session_id", sa.Text(), nullable=True),
        sa.Column("support_count", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("support_count >= 0", name="ck_wishes_support_count"),
        sa.CheckConstraint(
            "user_id IS NOT NULL OR session_id IS NOT NULL", name="ck_wishes_author"
        ),
    )
    op.create_index(
        "idx_wishes_user_id",
        "wishes",
        ["user_id"],
        unique=True,
        postgresql_where=sa.text("user_id IS NOT NULL"),
    )
    op.create_index(
        "idx_wishes_session_id",
        "wishes",
        ["session_id"],
        unique=True,
        postgresql_where=sa.text("session_id IS NOT NULL"),
    )
    op.create_index(
        "idx_wishes_created_at_id",
        "wishes",
        [sa.text("created_at DESC"), sa.text("id DESC")],
    )

    # ========================================================================
    # SUPPORTS table
    # ========================================================================
    op.create_table(
        "supports",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("wish_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("session_id", sa.Text(), nullable=True),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["wish_id"], ["wishes.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "(session_id IS NULL) <> (user_id IS NULL)", name="ck_supports_supporter"
        ),
    )
    # At most one support per identity per wish
    op.create_index(
        "idx_supports_wish_session",
        "supports",
        ["wish_id", "session_id"],
        unique=True,
        postgresql_where=sa.text("session_id IS NOT NULL"),
    )
    op.create_index(
        "idx_supports_wish_user",
        "supports",
        ["wish_id", "user_id"],
        unique=True,
        postgresql_where=sa.text("user_id IS NOT NULL"),
    )
    op.create_index("idx_supports_wish_id", "supports", ["wish_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_supports_wish_id", table_name="supports")
    op.drop_index("idx_supports_wish_user", table_name="supports")
    op.drop_index("idx_supports_wish_session", table_name="supports")
    op.drop_table("supports")

    op.drop_index("idx_wishes_created_at_id", table_name="wishes")
    op.drop_index("idx_wishes_session_id", table_name="wishes")
    op.drop_index("idx_wishes_user_id", table_name="wishes")
    op.drop_table("wishes")

    op.drop_table("users")
