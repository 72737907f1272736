"""Spaces table — one row per namespace key.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "spaces",
        sa.Column("space_id", sa.String(16), primary_key=True),
        sa.Column(
            "data", JSONB, nullable=False,
            server_default=sa.text("""'{"items": [], "lastPicked": null}'::jsonb"""),
        ),
        sa.Column("item_count", sa.Integer, server_default="0", nullable=False),
        sa.Column("version", sa.Integer, server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True),
                  server_default=sa.func.now(), nullable=False),
        sa.Column("last_modified", sa.DateTime(timezone=True),
                  server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("length(space_id) = 16", name="valid_space_id"),
        sa.CheckConstraint("item_count <= 1000", name="max_items_limit"),
        sa.CheckConstraint(
            "jsonb_typeof(data->'items') = 'array'", name="valid_json_structure",
        ),
    )
    op.create_index("idx_spaces_last_modified", "spaces", ["last_modified"])
    op.create_index("idx_spaces_created_at", "spaces", ["created_at"])
    op.create_index("idx_spaces_item_count", "spaces", ["item_count"])


def downgrade() -> None:
    op.drop_index("idx_spaces_item_count", table_name="spaces")
    op.drop_index("idx_spaces_created_at", table_name="spaces")
    op.drop_index("idx_spaces_last_modified", table_name="spaces")
    op.drop_table("spaces")
