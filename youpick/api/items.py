"""FastAPI item endpoints.

GET    /api/items          — list items in the caller's namespace
POST   /api/items          — add an item
DELETE /api/items/{index}  — remove the item at a zero-based index

All routes require the namespace secret header.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from youpick.api.dependencies import get_namespace_key, get_space_service
from youpick.spaces.service import SpaceService

router = APIRouter(prefix="/api/items", tags=["items"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------


class AddItemRequest(BaseModel):
    item: Any = None  # validated by the service so non-strings map to validation_error


class ItemsResponse(BaseModel):
    success: bool = True
    items: list[str]


class DeleteItemResponse(BaseModel):
    success: bool = True
    items: list[str]
    deleted: str


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _parse_index(raw: str) -> int | str:
    """Digits become an int; anything else is passed through for the service to reject."""
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return raw


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("", response_model=list[str])
async def list_items(
    key: str = Depends(get_namespace_key),
    service: SpaceService = Depends(get_space_service),
) -> list[str]:
    return await service.list_items(key)


@router.post("", response_model=ItemsResponse)
async def add_item(
    body: AddItemRequest,
    key: str = Depends(get_namespace_key),
    service: SpaceService = Depends(get_space_service),
) -> ItemsResponse:
    items = await service.add_item(key, body.item)
    return ItemsResponse(items=items)


@router.delete("/{index}", response_model=DeleteItemResponse)
async def delete_item(
    index: str,
    key: str = Depends(get_namespace_key),
    service: SpaceService = Depends(get_space_service),
) -> DeleteItemResponse:
    deleted, items = await service.remove_item(key, _parse_index(index))
    return DeleteItemResponse(items=items, deleted=deleted)
