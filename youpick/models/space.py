"""Space model — the persisted list and last pick for one namespace key.

A Space is created lazily on first access and only ever mutated through
the space service. ``last_picked`` is a point-in-time snapshot, not a live
pointer into ``items``.
"""

from typing import Any

from pydantic import Field

from youpick.models.common import UTCTimestamp, YouPickBase

MAX_ITEMS = 1000


class PickedRecord(YouPickBase):
    """Snapshot of one random-selection event.

    Serialized with the ``space`` alias for the namespace fragment, which is
    the layout stored in existing rows and returned over the API.
    """

    model_config = {**YouPickBase.model_config, "frozen": True}

    item: str
    index: int = Field(..., ge=0)
    timestamp: UTCTimestamp
    namespace_fragment: str = Field(..., alias="space", max_length=8)


class Space(YouPickBase):
    """Persisted state for one namespace key."""

    items: list[str] = Field(default_factory=list)
    last_picked: PickedRecord | None = Field(default=None, alias="lastPicked")
    created_at: UTCTimestamp | None = None
    last_modified_at: UTCTimestamp | None = None

    @property
    def item_count(self) -> int:
        return len(self.items)

    def to_document(self) -> dict[str, Any]:
        """Return the JSON document stored in the ``data`` column."""
        return self.model_dump(
            mode="json", by_alias=True, include={"items", "last_picked"},
        )

    @classmethod
    def from_document(cls, data: dict[str, Any] | None, **timestamps: Any) -> "Space":
        data = data or {}
        return cls(
            items=list(data.get("items") or []),
            last_picked=data.get("lastPicked") or None,
            **timestamps,
        )


class SpaceSummary(YouPickBase):
    """Admin view of one space; never exposes the item contents."""

    space_id: str
    item_count: int
    created_at: UTCTimestamp | None = None
    last_modified_at: UTCTimestamp | None = None
