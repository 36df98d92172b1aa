"""create users, problems, lists and attempt_entries

Revision ID: c0d1e2f3a4b5
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "c0d1e2f3a4b5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_table(name: str) -> bool:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    return name in inspector.get_table_names()


def upgrade() -> None:
    if not _has_table("users"):
        op.create_table(
            "users",
            sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("password_hash", sa.String(length=255), nullable=False),
            sa.Column("timezone", sa.String(length=64), nullable=False, server_default="America/Chicago"),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        )
        op.create_index("ix_users_email", "users", ["email"], unique=True)

    if not _has_table("problems"):
        op.create_table(
            "problems",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("template_version", sa.String(length=64), nullable=False),
            sa.Column("neet250_id", sa.Integer(), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("leetcode_slug", sa.String(length=255), nullable=False),
            sa.Column("category", sa.String(length=128), nullable=False),
            sa.Column("difficulty", sa.String(length=16), nullable=False),
            sa.Column("order_index", sa.Integer(), nullable=False),
            sa.UniqueConstraint("template_version", "neet250_id", name="uq_problems_template_neet"),
            sa.UniqueConstraint("template_version", "order_index", name="uq_problems_template_order"),
            sa.UniqueConstraint("template_version", "leetcode_slug", name="uq_problems_template_slug"),
        )
        op.create_index("ix_problems_template_category", "problems", ["template_version", "category"])

    if not _has_table("lists"):
        op.create_table(
            "lists",
            sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
            sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("template_version", sa.String(length=64), nullable=False),
            sa.Column("deprecated", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        )
        op.create_index("ix_lists_user_id", "lists", ["user_id"])

    if not _has_table("attempt_entries"):
        op.create_table(
            "attempt_entries",
            sa.Column("id", sa.Uuid(), primary_key=True, nullable=False),
            sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
            sa.Column("list_id", sa.Uuid(), sa.ForeignKey("lists.id", ondelete="CASCADE"), nullable=False),
            sa.Column("neet250_id", sa.Integer(), nullable=False),
            sa.Column("solved", sa.Boolean(), nullable=True),
            sa.Column("date_solved", sa.Date(), nullable=True),
            sa.Column("time_minutes", sa.Integer(), nullable=True),
            sa.Column("attempts", sa.Integer(), nullable=True),
            sa.Column("confidence", sa.String(length=16), nullable=True),
            sa.Column("time_complexity", sa.String(length=64), nullable=True),
            sa.Column("space_complexity", sa.String(length=64), nullable=True),
            sa.Column("notes", sa.Text(), nullable=True),
            sa.Column("problem_url", sa.String(length=500), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        )
        op.create_index("ix_attempt_entries_user_updated", "attempt_entries", ["user_id", "updated_at"])
        op.create_index("ix_attempt_entries_scope", "attempt_entries", ["user_id", "list_id", "neet250_id"])


def downgrade() -> None:
    op.drop_table("attempt_entries")
    op.drop_table("lists")
    op.drop_table("problems")
    op.drop_table("users")
