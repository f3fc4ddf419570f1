"""
Pydantic schemas for interaction endpoints.

Required fields are optional at the schema level so the router can answer
with a 400 and the expected error message instead of a 422.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class InteractionRequest(BaseModel):
    user_id: str | None = None
    message: str | None = None
    response: str | None = None
    business_type: Any = None
