"""
Onboarding progress persistence.
"""

from __future__ import annotations

import json
from typing import Any

from core.db import Database


def _json_arg(value: dict[str, Any] | None) -> str | None:
    """
    asyncpg does not automatically encode Python dicts for json/jsonb parameters.
    We pass JSON as a string and cast to jsonb in SQL.
    """
    if value is None:
        return None
    return json.dumps(value, ensure_ascii=True)


async def insert_progress(db: Database, record: dict) -> dict | None:
    row = await db.fetch_one(
        """
        INSERT INTO onboarding_progress (user_id, step_id, completed, metadata, business_type, created_at)
        VALUES ($1, $2, $3, COALESCE($4::jsonb, '{}'::jsonb), $5, $6)
        RETURNING id, user_id, step_id, completed, metadata::text AS metadata, business_type, created_at
        """,
        record["user_id"],
        record["step_id"],
        record["completed"],
        _json_arg(record["metadata"]),
        record["business_type"],
        record["created_at"],
    )
    if row is not None and isinstance(row.get("metadata"), str):
        row["metadata"] = json.loads(row["metadata"])
    return row
