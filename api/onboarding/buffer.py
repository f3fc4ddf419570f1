"""
In-memory onboarding progress cache for development.

Append-only and process-lifetime. Nothing reads it back to build a response.
"""

from __future__ import annotations


class ProgressBuffer:
    def __init__(self) -> None:
        self._records: list[dict] = []

    def append(self, record: dict) -> None:
        self._records.append(dict(record))

    def __len__(self) -> int:
        return len(self._records)

    def snapshot(self) -> list[dict]:
        return [dict(record) for record in self._records]
