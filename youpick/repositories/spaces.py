"""Space repository — row-level access to the ``spaces`` table.

Repositories call execute()/flush() only — never commit().
Transaction scope belongs to the caller (the SQL space store).
"""

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from youpick.db.tables import EMPTY_SPACE_DOCUMENT, SpaceRow
from youpick.models.common import utc_now

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class SpaceRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert_if_absent(self, space_id: str) -> bool:
        """Create an empty space unless one exists. Returns True if inserted.

        Uses INSERT ... ON CONFLICT DO NOTHING so concurrent first access to
        the same key converges on one row.
        """
        dialect = self._session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"No upsert support for dialect {dialect!r}")
        now = utc_now()
        stmt = (
            insert(SpaceRow)
            .values(
                space_id=space_id,
                data=dict(EMPTY_SPACE_DOCUMENT),
                item_count=0,
                version=0,
                created_at=now,
                last_modified=now,
            )
            .on_conflict_do_nothing(index_elements=[SpaceRow.space_id])
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def get(self, space_id: str, *, for_update: bool = False) -> SpaceRow | None:
        stmt = (
            select(SpaceRow)
            .where(SpaceRow.space_id == space_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def compare_and_swap(
        self,
        space_id: str,
        *,
        expected_version: int,
        data: dict[str, Any],
        item_count: int,
    ) -> SpaceRow | None:
        """Write ``data`` only if the row is still at ``expected_version``.

        Returns the updated row, or None when another writer got there first.
        """
        result = await self._session.execute(
            update(SpaceRow)
            .where(
                SpaceRow.space_id == space_id,
                SpaceRow.version == expected_version,
            )
            .values(
                data=data,
                item_count=item_count,
                version=expected_version + 1,
                last_modified=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            return None
        await self._session.flush()
        return await self.get(space_id)

    async def list_all(self) -> list[SpaceRow]:
        result = await self._session.execute(
            select(SpaceRow).order_by(SpaceRow.last_modified.desc())
        )
        return list(result.scalars().all())
