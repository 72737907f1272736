"""Map SpaceError codes onto HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from youpick.spaces.errors import (
    CapacityExceededError,
    DuplicateItemError,
    InvalidIndexError,
    ItemNotFoundError,
    ItemValidationError,
    PickMismatchError,
    SpaceError,
    StorageError,
)

STATUS_BY_CODE: dict[str, int] = {
    ItemValidationError.code: 400,
    CapacityExceededError.code: 400,
    InvalidIndexError.code: 400,
    PickMismatchError.code: 400,
    DuplicateItemError.code: 409,
    ItemNotFoundError.code: 404,
    StorageError.code: 503,
}


async def space_error_handler(request: Request, exc: SpaceError) -> JSONResponse:
    body: dict[str, str] = {"error": exc.message, "code": exc.code}
    if isinstance(exc, ItemValidationError):
        body["reason"] = exc.reason.value
    headers = {"Retry-After": "5"} if isinstance(exc, StorageError) else None
    return JSONResponse(
        status_code=STATUS_BY_CODE.get(exc.code, 500), content=body, headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SpaceError, space_error_handler)
