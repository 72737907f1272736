"""Seed script — load a demo list into the YouPick database.

Creates the namespace for DEMO_SECRET and adds DEMO_ITEMS that are not
already present.

Idempotent: safe to run multiple times — existing items are skipped.

Usage:
    python -m scripts               # against DATABASE_URL from .env
    pytest tests/scripts/test_seed.py  # against aiosqlite
"""

import asyncio

from youpick.spaces.errors import DuplicateItemError
from youpick.spaces.namespace import derive_namespace_key, namespace_fragment
from youpick.spaces.service import SpaceService
from youpick.stores.base import SpaceStore

DEMO_SECRET = "youpick-demo"

DEMO_ITEMS = [
    "Pizza",
    "Sushi",
    "Tacos",
    "Ramen",
    "Falafel",
]


async def seed_demo_space(store: SpaceStore, secret: str = DEMO_SECRET) -> dict:
    """Add the demo items to the namespace for ``secret``; returns a summary."""
    service = SpaceService(store)
    key = derive_namespace_key(secret)
    added = 0
    for item in DEMO_ITEMS:
        try:
            await service.add_item(key, item)
        except DuplicateItemError:
            continue
        added += 1
    items = await service.list_items(key)
    return {
        "space": namespace_fragment(key),
        "added": added,
        "item_count": len(items),
    }


async def _run_seed() -> None:
    from youpick.api.dependencies import get_space_store
    from youpick.db.session import engine

    try:
        result = await seed_demo_space(get_space_store())
    finally:
        await engine.dispose()

    print("Seed complete.")
    print(f"  Secret:     {DEMO_SECRET}")
    print(f"  Space:      {result['space']}")
    print(f"  Added:      {result['added']}")
    print(f"  Items:      {result['item_count']}")


if __name__ == "__main__":
    asyncio.run(_run_seed())
