"""SQL space store — atomic read-modify-write over the ``spaces`` table.

Each operation runs in its own transaction:

1. ``INSERT ... ON CONFLICT DO NOTHING`` creates the row on first access.
2. ``SELECT ... FOR UPDATE`` locks the row where the dialect supports it.
3. The new document is written with a version compare-and-swap.

On PostgreSQL the row lock already serializes writers, so the swap always
succeeds. Where row locks are unavailable (SQLite) a lost swap is retried
against a fresh read, up to ``max_attempts`` times.
"""

import structlog
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from youpick.db.tables import SpaceRow
from youpick.models.space import Space, SpaceSummary
from youpick.repositories.spaces import SpaceRepository
from youpick.spaces.errors import StorageError
from youpick.spaces.namespace import namespace_fragment
from youpick.stores.base import SpaceMutation, SpaceStore

logger = structlog.get_logger(__name__)


def _space_from_row(row: SpaceRow) -> Space:
    return Space.from_document(
        row.data,
        created_at=row.created_at,
        last_modified_at=row.last_modified,
    )


class SqlSpaceStore(SpaceStore):
    backend_name = "sql"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        *,
        max_attempts: int = 25,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._session_factory = session_factory
        self._max_attempts = max_attempts

    async def get(self, key: str) -> Space:
        try:
            async with self._session_factory() as session, session.begin():
                repo = SpaceRepository(session)
                row = await repo.get(key)
                if row is None:
                    await repo.insert_if_absent(key)
                    row = await repo.get(key)
                return _space_from_row(row)
        except SQLAlchemyError as exc:
            logger.error("space_read_failed", space=namespace_fragment(key),
                         error=type(exc).__name__)
            raise StorageError() from exc

    async def mutate(self, key: str, fn: SpaceMutation) -> Space:
        for attempt in range(1, self._max_attempts + 1):
            try:
                async with self._session_factory() as session, session.begin():
                    repo = SpaceRepository(session)
                    await repo.insert_if_absent(key)
                    row = await repo.get(key, for_update=True)
                    updated = fn(_space_from_row(row))
                    written = await repo.compare_and_swap(
                        key,
                        expected_version=row.version,
                        data=updated.to_document(),
                        item_count=updated.item_count,
                    )
                    if written is not None:
                        return _space_from_row(written)
            except SQLAlchemyError as exc:
                logger.error("space_write_failed", space=namespace_fragment(key),
                             attempt=attempt, error=type(exc).__name__)
                raise StorageError() from exc
            logger.debug("space_write_conflict", space=namespace_fragment(key),
                         attempt=attempt)
        logger.error("space_write_contention", space=namespace_fragment(key),
                     attempts=self._max_attempts)
        raise StorageError("Storage backend busy, retry later")

    async def list_spaces(self) -> list[SpaceSummary]:
        try:
            async with self._session_factory() as session:
                rows = await SpaceRepository(session).list_all()
        except SQLAlchemyError as exc:
            logger.error("space_list_failed", error=type(exc).__name__)
            raise StorageError() from exc
        return [
            SpaceSummary(
                space_id=row.space_id,
                item_count=row.item_count,
                created_at=row.created_at,
                last_modified_at=row.last_modified,
            )
            for row in rows
        ]

    async def ping(self) -> bool:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            return False
        return True
