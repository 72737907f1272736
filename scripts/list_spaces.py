"""List every space, most recently modified first.

Shows only the namespace fragment and counts; item text stays private.

Usage:
    python -m scripts.list_spaces
"""

import asyncio

from youpick.models.space import SpaceSummary
from youpick.spaces.namespace import namespace_fragment


def format_summaries(summaries: list[SpaceSummary]) -> list[str]:
    lines = [f"  {'Space':<10} {'Items':>6} {'Created':<26} {'Last modified':<26}",
             f"  {'─' * 10} {'─' * 6} {'─' * 26} {'─' * 26}"]
    for s in summaries:
        created = s.created_at.isoformat() if s.created_at else "-"
        modified = s.last_modified_at.isoformat() if s.last_modified_at else "-"
        lines.append(f"  {namespace_fragment(s.space_id):<10} {s.item_count:>6}"
                     f" {created:<26} {modified:<26}")
    return lines


async def _run() -> None:
    from youpick.api.dependencies import get_space_store
    from youpick.db.session import engine

    try:
        summaries = await get_space_store().list_spaces()
    finally:
        await engine.dispose()

    print(f"{len(summaries)} space(s)")
    for line in format_summaries(summaries):
        print(line)


if __name__ == "__main__":
    asyncio.run(_run())
