"""FastAPI dependency injection factories for the space core.

The store is built once per process from settings; the service is cheap and
built per request. Tests override ``get_space_store``.
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, Request

from youpick.config.settings import Settings, StoreBackend, get_settings
from youpick.db.session import async_session_factory
from youpick.spaces.namespace import derive_namespace_key
from youpick.spaces.service import SpaceService
from youpick.stores.base import SpaceStore
from youpick.stores.memory import MemorySpaceStore
from youpick.stores.sql import SqlSpaceStore


@lru_cache
def get_space_store() -> SpaceStore:
    settings = get_settings()
    if settings.SPACE_STORE_BACKEND == StoreBackend.MEMORY:
        return MemorySpaceStore()
    return SqlSpaceStore(
        async_session_factory, max_attempts=settings.MUTATE_MAX_ATTEMPTS,
    )


async def get_space_service(
    store: SpaceStore = Depends(get_space_store),
) -> SpaceService:
    return SpaceService(store)


async def get_namespace_key(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> str:
    """Derive the namespace key from the secret header; 400 if it is missing."""
    secret = request.headers.get(settings.SECRET_HEADER)
    if not secret:
        raise HTTPException(
            status_code=400,
            detail=f"Password required. Provide it via the {settings.SECRET_HEADER} header.",
        )
    return derive_namespace_key(secret)
