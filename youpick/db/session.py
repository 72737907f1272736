"""SQLAlchemy async session setup for YouPick.

Provides:
- Base: DeclarativeBase for all ORM models
- engine: async engine configured from settings
- async_session_factory: session maker bound to engine
"""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from youpick.config.settings import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine; pool sizing only applies to server databases."""
    options: dict[str, Any] = {
        "echo": False,
        "pool_pre_ping": True,
    }
    if not settings.uses_sqlite:
        options["pool_size"] = settings.DB_POOL_SIZE
        options["pool_timeout"] = settings.DB_POOL_TIMEOUT_SECONDS
    return create_async_engine(settings.DATABASE_URL, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


_settings = get_settings()

engine = build_engine(_settings)

async_session_factory = build_session_factory(engine)

