"""
Playbook run persistence (raw SQL on `playbook_runs`).
"""

from __future__ import annotations

from datetime import datetime

from core.db import Database

TOP_PLAYBOOKS_LIMIT = 5


async def insert_run(
    db: Database,
    *,
    playbook_id: str,
    business_type: str,
    created_at: datetime,
) -> dict | None:
    return await db.fetch_one(
        """
        INSERT INTO playbook_runs (playbook_id, business_type, created_at)
        VALUES ($1, $2, $3)
        RETURNING id, playbook_id, business_type, created_at
        """,
        playbook_id,
        business_type,
        created_at,
    )


async def top_playbooks(db: Database, *, limit: int = TOP_PLAYBOOKS_LIMIT) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT playbook_id, count(*) AS count
        FROM playbook_runs
        GROUP BY playbook_id
        ORDER BY count DESC, playbook_id ASC
        LIMIT $1
        """,
        limit,
    )
