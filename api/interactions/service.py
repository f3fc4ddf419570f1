"""
Interaction logging.

Scope:
- classify the vertical
- persist one `agent_interactions` row
- bump the in-memory vertical counters
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from core.db import Database, StoreError
from verticals import catalog
from verticals.stats import VerticalStats

from . import repository

DELIVERY_MARKER = "course delivery"


@dataclass(frozen=True)
class LogResult:
    data: dict | None
    error: StoreError | None
    business_type: str


def is_delivery_message(message: str | None) -> bool:
    return DELIVERY_MARKER in (message or "").lower()


async def log_interaction(
    db: Database,
    stats: VerticalStats,
    *,
    user_id: str,
    message: str,
    response: str | None = None,
    business_type: Any = None,
) -> LogResult:
    """
    Persist an interaction and record it in the vertical counters.

    Store errors are returned, not raised; the router picks the status code.
    Counters are updated even when the insert fails.
    """
    normalized = catalog.normalize(business_type)

    data: dict | None = None
    error: StoreError | None = None
    try:
        data = await repository.insert_interaction(
            db,
            user_id=user_id,
            user_message=message,
            agent_response=response or None,
            business_type=normalized,
            created_at=datetime.now(timezone.utc),
        )
    except StoreError as exc:
        error = exc

    stats.record_interaction(normalized, is_delivery=is_delivery_message(message))
    return LogResult(data=data, error=error, business_type=normalized)
