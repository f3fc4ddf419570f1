"""
Per-vertical interaction counters kept in process memory.

Counters start at zero for every catalog entry, are seeded once from the
store at startup, and then only grow. They are not rolled back when a store
write fails, so after store errors they can run ahead of persisted truth.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.db import Database, StoreError

from . import catalog, repository

logger = logging.getLogger(__name__)

SEED_SAMPLE_LIMIT = 500


@dataclass
class VerticalCounters:
    interactions: int = 0
    deliveries: int = 0


@dataclass(frozen=True)
class SeedResult:
    seeded: bool
    rows: int = 0
    error: str | None = None


class VerticalStats:
    def __init__(self, db: Database) -> None:
        self._db = db
        self._counters: dict[str, VerticalCounters] = {
            business_type.id: VerticalCounters() for business_type in catalog.BUSINESS_TYPES
        }

    async def seed(self) -> SeedResult:
        """
        Count up to `SEED_SAMPLE_LIMIT` historical interactions per vertical.

        Never raises: a fetch failure leaves the counters at zero and is
        reported in the result for the caller to log.
        """
        if not self._db.configured:
            return SeedResult(seeded=False)

        try:
            values = await repository.sample_business_types(self._db, limit=SEED_SAMPLE_LIMIT)
        except StoreError as exc:
            return SeedResult(seeded=False, error=str(exc))

        for value in values:
            self._entry(catalog.normalize(value)).interactions += 1
        return SeedResult(seeded=True, rows=len(values))

    def record_interaction(self, business_type: str, is_delivery: bool = False) -> None:
        counters = self._entry(business_type)
        counters.interactions += 1
        if is_delivery:
            counters.deliveries += 1

    def get(self, business_type: str) -> VerticalCounters:
        counters = self._counters.get(business_type)
        if counters is None:
            return VerticalCounters()
        return VerticalCounters(counters.interactions, counters.deliveries)

    def breakdown(self, *, include_goal: bool = False) -> list[dict]:
        rows = []
        for business_type in catalog.BUSINESS_TYPES:
            counters = self.get(business_type.id)
            row = {"id": business_type.id, "label": business_type.label}
            if include_goal:
                row["goal"] = business_type.goal
            row["interactions"] = counters.interactions
            row["deliveries"] = counters.deliveries
            rows.append(row)
        return rows

    def _entry(self, business_type: str) -> VerticalCounters:
        counters = self._counters.get(business_type)
        if counters is None:
            logger.debug("vertical_counters_created business_type=%s", business_type)
            counters = self._counters[business_type] = VerticalCounters()
        return counters
