"""
Vertical statistics persistence (read-only).
"""

from __future__ import annotations

from core.db import Database


async def sample_business_types(db: Database, *, limit: int) -> list[str | None]:
    rows = await db.fetch_all(
        """
        SELECT business_type
        FROM agent_interactions
        LIMIT $1
        """,
        limit,
    )
    return [row["business_type"] for row in rows]
