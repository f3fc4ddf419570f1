"""
Interaction persistence (raw SQL on `agent_interactions`).
"""

from __future__ import annotations

from datetime import datetime

from core.db import Database

USER_HISTORY_LIMIT = 50


async def insert_interaction(
    db: Database,
    *,
    user_id: str,
    user_message: str,
    agent_response: str | None,
    business_type: str,
    created_at: datetime,
) -> dict | None:
    return await db.fetch_one(
        """
        INSERT INTO agent_interactions (user_id, user_message, agent_response, business_type, created_at)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id, user_id, user_message, agent_response, business_type, created_at
        """,
        user_id,
        user_message,
        agent_response,
        business_type,
        created_at,
    )


async def list_for_user(db: Database, user_id: str, *, limit: int = USER_HISTORY_LIMIT) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT *
        FROM agent_interactions
        WHERE user_id = $1
        ORDER BY created_at DESC
        LIMIT $2
        """,
        user_id,
        limit,
    )


async def list_recent(db: Database, *, limit: int = 10) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, user_id, user_message, agent_response, created_at
        FROM agent_interactions
        ORDER BY created_at DESC
        LIMIT $1
        """,
        limit,
    )


async def count_all(db: Database) -> int | None:
    return await db.fetch_val(
        """
        SELECT count(*)
        FROM agent_interactions
        """
    )
