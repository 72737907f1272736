"""Space service — the only component allowed to change a Space.

Validation and index-shape checks run before the store is touched. Every
check that depends on the current list runs inside ``SpaceStore.mutate`` so
it sees the same state the write replaces.

Removal rule for the last pick: removing index ``i`` clears ``last_picked``
whenever ``last_picked.index >= i``. Removing below the pick shifts the item
it pointed at, so the snapshot can no longer be trusted.
"""

from collections.abc import Callable
from datetime import datetime

import structlog

from youpick.models.common import utc_now
from youpick.models.space import MAX_ITEMS, PickedRecord, Space
from youpick.spaces.errors import (
    CapacityExceededError,
    DuplicateItemError,
    InvalidIndexError,
    ItemNotFoundError,
    PickMismatchError,
)
from youpick.spaces.namespace import namespace_fragment
from youpick.spaces.validation import validate_item
from youpick.stores.base import SpaceStore

logger = structlog.get_logger(__name__)


def _require_index(index: object) -> int:
    # JSON clients may send 1.0 for 1; bool is an int subclass and is never an index.
    if isinstance(index, float) and index.is_integer():
        index = int(index)
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise InvalidIndexError()
    return index


class SpaceService:
    """Validated list operations over a SpaceStore."""

    def __init__(
        self,
        store: SpaceStore,
        *,
        clock: Callable[[], datetime] = utc_now,
        max_items: int = MAX_ITEMS,
    ) -> None:
        self._store = store
        self._clock = clock
        self._max_items = max_items

    async def list_items(self, key: str) -> list[str]:
        space = await self._store.get(key)
        return list(space.items)

    async def add_item(self, key: str, raw_item: object) -> list[str]:
        item = validate_item(raw_item)

        def _append(space: Space) -> Space:
            if item in space.items:
                raise DuplicateItemError()
            if len(space.items) >= self._max_items:
                raise CapacityExceededError()
            return space.model_copy(update={"items": [*space.items, item]})

        updated = await self._store.mutate(key, _append)
        logger.info("item_added", space=namespace_fragment(key),
                    item_count=updated.item_count)
        return list(updated.items)

    async def remove_item(self, key: str, index: object) -> tuple[str, list[str]]:
        """Remove the item at ``index``; returns the removed value and the new list."""
        position = _require_index(index)
        removed: list[str] = []

        def _remove(space: Space) -> Space:
            if position >= len(space.items):
                raise ItemNotFoundError()
            items = list(space.items)
            removed.append(items.pop(position))
            last_picked = space.last_picked
            if last_picked is not None and last_picked.index >= position:
                last_picked = None
            return space.model_copy(update={"items": items, "last_picked": last_picked})

        updated = await self._store.mutate(key, _remove)
        logger.info("item_removed", space=namespace_fragment(key), index=position,
                    item_count=updated.item_count,
                    pick_cleared=updated.last_picked is None)
        return removed[-1], list(updated.items)

    async def record_pick(self, key: str, item: object, index: object) -> PickedRecord:
        """Record a client-side pick after checking it against the current list."""
        position = _require_index(index)
        value = validate_item(item)
        record = PickedRecord(
            item=value,
            index=position,
            timestamp=self._clock(),
            namespace_fragment=namespace_fragment(key),
        )

        def _record(space: Space) -> Space:
            if position >= len(space.items) or space.items[position] != value:
                raise PickMismatchError()
            return space.model_copy(update={"last_picked": record})

        await self._store.mutate(key, _record)
        logger.info("pick_recorded", space=record.namespace_fragment, index=position)
        return record

    async def get_picked(self, key: str) -> PickedRecord | None:
        space = await self._store.get(key)
        return space.last_picked
