"""Shared types and base models used across YouPick domain models."""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Return the current UTC timestamp (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


# --- Reusable annotated types ---

UTCTimestamp = Annotated[
    datetime, Field(description="UTC timezone-aware timestamp.")
]


# --- Base model ---


class YouPickBase(BaseModel):
    """Base model with common configuration for all YouPick Pydantic models."""

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }
