"""
Pydantic schemas for onboarding endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ProgressRequest(BaseModel):
    user_id: str | None = None
    step_id: str | None = None
    completed: bool | None = False
    metadata: dict[str, Any] | None = None
    business_type: Any = None
