"""
Dashboard aggregation.

Totals come from the store; the vertical breakdown comes from the in-memory
counters.
"""

from __future__ import annotations

from core.db import Database
from interactions import repository as interaction_repository
from verticals.stats import VerticalStats

RECENT_LIMIT = 10


def baseline_summary(*, configured: bool) -> dict:
    return {
        "totalInteractions": 0,
        "uniqueUsers": 0,
        "recentInteractions": [],
        "status": "connected" if configured else "unconfigured",
        "note": (
            "Live metrics from agent_interactions table"
            if configured
            else "Supabase credentials missing"
        ),
    }


async def summary(db: Database, stats: VerticalStats) -> dict:
    """
    Raises `StoreError` when either query fails.
    """
    recent = await interaction_repository.list_recent(db, limit=RECENT_LIMIT)
    count = await interaction_repository.count_all(db)

    # Unique users are counted over the recent window only.
    unique_users = len({row.get("user_id") for row in recent})
    return {
        "totalInteractions": count if isinstance(count, int) else len(recent),
        "uniqueUsers": unique_users,
        "recentInteractions": recent,
        "status": "connected",
        "note": "Live metrics from agent_interactions table.",
        "verticalBreakdown": stats.breakdown(),
    }
