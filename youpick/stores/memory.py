"""In-process space store for development and tests.

Mutations of one key are serialized by that key's asyncio.Lock; different
keys never wait on each other. State lives only as long as the process.

Nothing is ever evicted: every key touched, including a read of an unseen
key, keeps its Space and its lock until the process exits. Use the SQL store
for anything long-running.
"""

import asyncio
from collections import defaultdict

from youpick.models.common import utc_now
from youpick.models.space import MAX_ITEMS, Space, SpaceSummary
from youpick.spaces.errors import StorageError
from youpick.stores.base import SpaceMutation, SpaceStore


class MemorySpaceStore(SpaceStore):
    backend_name = "memory"

    def __init__(self) -> None:
        self._spaces: dict[str, Space] = {}
        self._locks: defaultdict[str, asyncio.Lock] = defaultdict(asyncio.Lock)

    def _ensure(self, key: str) -> Space:
        space = self._spaces.get(key)
        if space is None:
            now = utc_now()
            space = Space(created_at=now, last_modified_at=now)
            self._spaces[key] = space
        return space

    async def get(self, key: str) -> Space:
        return self._ensure(key).model_copy(deep=True)

    async def mutate(self, key: str, fn: SpaceMutation) -> Space:
        async with self._locks[key]:
            current = self._ensure(key)
            updated = fn(current.model_copy(deep=True))
            if updated.item_count > MAX_ITEMS:
                raise StorageError("Space exceeds the item limit")
            stored = updated.model_copy(update={
                "created_at": current.created_at,
                "last_modified_at": utc_now(),
            })
            self._spaces[key] = stored
            return stored.model_copy(deep=True)

    async def list_spaces(self) -> list[SpaceSummary]:
        summaries = [
            SpaceSummary(
                space_id=key,
                item_count=space.item_count,
                created_at=space.created_at,
                last_modified_at=space.last_modified_at,
            )
            for key, space in self._spaces.items()
        ]
        return sorted(
            summaries, key=lambda s: s.last_modified_at or utc_now(), reverse=True,
        )

    async def ping(self) -> bool:
        return True
