"""SQLAlchemy ORM table models for YouPick.

One row per namespace key. The ``data`` column keeps the document layout
``{"items": [...], "lastPicked": {...} | null}`` in FlexJSON (JSONB on
Postgres, JSON on SQLite).
"""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from youpick.db.session import Base
from youpick.models.space import MAX_ITEMS
from youpick.spaces.namespace import NAMESPACE_KEY_LENGTH

# JSONB on PostgreSQL, plain JSON on SQLite (for tests)
FlexJSON = JSONB().with_variant(JSON(), "sqlite")

EMPTY_SPACE_DOCUMENT: dict = {"items": [], "lastPicked": None}


class SpaceRow(Base):
    """Operational row: rewritten in place by compare-and-swap on ``version``."""

    __tablename__ = "spaces"
    __table_args__ = (
        CheckConstraint(
            f"length(space_id) = {NAMESPACE_KEY_LENGTH}", name="valid_space_id",
        ),
        CheckConstraint(f"item_count <= {MAX_ITEMS}", name="max_items_limit"),
        Index("idx_spaces_last_modified", "last_modified"),
        Index("idx_spaces_created_at", "created_at"),
        Index("idx_spaces_item_count", "item_count"),
    )

    space_id: Mapped[str] = mapped_column(
        String(NAMESPACE_KEY_LENGTH), primary_key=True,
    )
    data = mapped_column(FlexJSON, nullable=False)
    item_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    last_modified: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
