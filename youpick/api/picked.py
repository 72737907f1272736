"""FastAPI pick endpoints.

GET  /api/picked: the last recorded pick, or null
POST /api/picked: record a pick chosen by the client

Random selection happens on the client; the server only checks that the
submitted item/index pair matches the current list before storing it.
"""

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from youpick.api.dependencies import get_namespace_key, get_space_service
from youpick.models.space import PickedRecord
from youpick.spaces.service import SpaceService

router = APIRouter(prefix="/api/picked", tags=["picked"])


class RecordPickRequest(BaseModel):
    # both validated by the service so bad shapes map to stable error codes
    item: Any = None
    index: Any = None


class RecordPickResponse(BaseModel):
    model_config = {"populate_by_name": True}

    success: bool = True
    last_picked: PickedRecord = Field(..., alias="lastPicked")


@router.get("", response_model=PickedRecord | None)
async def get_picked(
    key: str = Depends(get_namespace_key),
    service: SpaceService = Depends(get_space_service),
) -> PickedRecord | None:
    return await service.get_picked(key)


@router.post("", response_model=RecordPickResponse)
async def record_pick(
    body: RecordPickRequest,
    key: str = Depends(get_namespace_key),
    service: SpaceService = Depends(get_space_service),
) -> RecordPickResponse:
    record = await service.record_pick(key, body.item, body.index)
    return RecordPickResponse(last_picked=record)
