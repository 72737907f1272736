"""Tests for SQLAlchemy ORM models — youpick/db/tables.py.

Tests verify:
- the spaces table and its indexes are created
- FlexJSON round-trips the stored document
- CHECK constraints on key length and item count
"""

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from youpick.db.tables import EMPTY_SPACE_DOCUMENT, SpaceRow
from youpick.models.common import utc_now
from youpick.models.space import MAX_ITEMS


def _row(space_id: str, *, item_count: int = 0, data: dict | None = None) -> SpaceRow:
    now = utc_now()
    return SpaceRow(
        space_id=space_id,
        data=data if data is not None else dict(EMPTY_SPACE_DOCUMENT),
        item_count=item_count,
        version=0,
        created_at=now,
        last_modified=now,
    )


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


class TestSchema:
    @pytest.mark.anyio
    async def test_spaces_table_created(self, db_engine) -> None:
        async with db_engine.connect() as conn:
            tables = await conn.run_sync(lambda c: inspect(c).get_table_names())
            indexes = await conn.run_sync(lambda c: inspect(c).get_indexes("spaces"))
        assert "spaces" in tables
        assert {ix["name"] for ix in indexes} >= {
            "idx_spaces_last_modified", "idx_spaces_created_at", "idx_spaces_item_count",
        }


class TestSpaceRow:
    @pytest.mark.anyio
    async def test_document_round_trip(self, session: AsyncSession, key: str) -> None:
        doc = {
            "items": ["Pizza", "Sushi"],
            "lastPicked": {"item": "Sushi", "index": 1,
                           "timestamp": "2025-11-23T12:00:00Z", "space": key[:8]},
        }
        session.add(_row(key, item_count=2, data=doc))
        await session.commit()
        fetched = await session.get(SpaceRow, key)
        assert fetched.data == doc

    @pytest.mark.anyio
    async def test_space_id_length_enforced(self, session: AsyncSession) -> None:
        session.add(_row("too-short"))
        with pytest.raises(IntegrityError):
            await session.commit()

    @pytest.mark.anyio
    async def test_item_count_limit_enforced(self, session: AsyncSession, key: str) -> None:
        session.add(_row(key, item_count=MAX_ITEMS + 1))
        with pytest.raises(IntegrityError):
            await session.commit()

    @pytest.mark.anyio
    async def test_item_count_at_limit_allowed(self, session: AsyncSession, key: str) -> None:
        session.add(_row(key, item_count=MAX_ITEMS))
        await session.commit()
        assert (await session.get(SpaceRow, key)).item_count == MAX_ITEMS
