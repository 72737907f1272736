"""FastAPI application entry point for YouPick.

Serves the item and pick routes (namespace secret required) plus the
unauthenticated liveness probes.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from youpick.api.dependencies import get_space_store
from youpick.api.errors import register_error_handlers
from youpick.api.items import router as items_router
from youpick.api.picked import router as picked_router
from youpick.config.settings import get_settings
from youpick.db.session import engine
from youpick.observability.health import check_health
from youpick.observability.logging_config import configure_logging
from youpick.stores.base import SpaceStore

APP_VERSION = "0.1.0"

settings = get_settings()

configure_logging(settings)

logger: structlog.stdlib.BoundLogger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("startup", version=APP_VERSION,
                storage=settings.SPACE_STORE_BACKEND.value)
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("shutdown", detail="database pool closed")


# --- FastAPI app ---
app = FastAPI(
    title="YouPick API",
    description="Shared random-picker lists scoped by a namespace secret.",
    version=APP_VERSION,
    lifespan=lifespan,
)

# --- CORS middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type", "Accept", settings.SECRET_HEADER],
)


@app.middleware("http")
async def log_request(request: Request, call_next):
    logger.info(
        "request",
        method=request.method,
        path=request.url.path,
        client=request.client.host if request.client else "unknown",
    )
    return await call_next(request)


# --- Routers ---
app.include_router(items_router)
app.include_router(picked_router)

register_error_handlers(app)


# --- Infrastructure Endpoints (no secret required) ---


async def _health(store: SpaceStore) -> dict:
    report = await check_health(store)
    return {
        **report.to_dict(),
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
    }


@app.get("/health")
async def health_check(store: SpaceStore = Depends(get_space_store)) -> dict:
    """Liveness probe. Returns 200 always (degraded status if storage is down)."""
    return await _health(store)


@app.get("/healthz")
async def healthz(store: SpaceStore = Depends(get_space_store)) -> dict:
    """Same probe under the path cloud platforms expect."""
    return await _health(store)


@app.get("/api/version")
async def get_version() -> dict[str, str]:
    """Return application name, version, and environment."""
    return {
        "name": "YouPick",
        "version": APP_VERSION,
        "environment": settings.ENVIRONMENT.value,
    }
