"""Tests for the Space domain models and their stored document layout."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from youpick.models.space import PickedRecord, Space

TS = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestPickedRecord:
    def test_accepts_space_alias(self) -> None:
        record = PickedRecord(item="Pizza", index=0, timestamp=TS, space="2cf24dba")
        assert record.namespace_fragment == "2cf24dba"

    def test_dumps_with_space_alias(self) -> None:
        record = PickedRecord(item="Pizza", index=0, timestamp=TS, namespace_fragment="2cf24dba")
        data = record.model_dump(mode="json", by_alias=True)
        assert data["space"] == "2cf24dba"
        assert "namespace_fragment" not in data

    def test_rejects_negative_index(self) -> None:
        with pytest.raises(ValidationError):
            PickedRecord(item="Pizza", index=-1, timestamp=TS, space="2cf24dba")

    def test_rejects_full_key_as_fragment(self) -> None:
        with pytest.raises(ValidationError):
            PickedRecord(item="Pizza", index=0, timestamp=TS, space="2cf24dba5fb0a30e")

    def test_is_frozen(self) -> None:
        record = PickedRecord(item="Pizza", index=0, timestamp=TS, space="2cf24dba")
        with pytest.raises(ValidationError):
            record.item = "Sushi"


class TestSpaceDocument:
    def test_new_space_is_empty(self) -> None:
        space = Space()
        assert space.items == []
        assert space.last_picked is None
        assert space.item_count == 0

    def test_from_stored_row_layout(self) -> None:
        doc = {
            "items": ["Pizza", "Sushi"],
            "lastPicked": {
                "item": "Sushi",
                "index": 1,
                "timestamp": "2024-05-01T12:00:00Z",
                "space": "2cf24dba",
            },
        }
        space = Space.from_document(doc, created_at=TS, last_modified_at=TS)
        assert space.item_count == 2
        assert space.last_picked.item == "Sushi"
        assert space.last_picked.timestamp == TS
        assert space.created_at == TS

    def test_from_missing_document(self) -> None:
        space = Space.from_document(None)
        assert space.items == []
        assert space.last_picked is None

    def test_to_document_excludes_timestamps(self) -> None:
        space = Space(items=["Pizza"], created_at=TS, last_modified_at=TS)
        assert space.to_document() == {"items": ["Pizza"], "lastPicked": None}

    def test_to_document_uses_aliases(self) -> None:
        record = PickedRecord(item="Pizza", index=0, timestamp=TS, space="2cf24dba")
        doc = Space(items=["Pizza"], last_picked=record).to_document()
        assert doc["lastPicked"]["space"] == "2cf24dba"
        assert doc["lastPicked"]["index"] == 0
