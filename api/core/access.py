"""
Shared-secret access gate for mutating and aggregating routes.
"""

from __future__ import annotations

import secrets

from fastapi import Depends, Header, HTTPException, status

from .context import AppContext, get_context

API_KEY_HEADER = "x-api-key"
UNAUTHORIZED_DETAIL = "Unauthorized - missing API key"


def is_authorized(provided: str | None, *, expected: str) -> bool:
    if provided is None:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def require_api_key(
    x_api_key: str | None = Header(default=None, alias=API_KEY_HEADER),
    ctx: AppContext = Depends(get_context),
) -> None:
    if not ctx.settings.enforce_api_key:
        return None
    if is_authorized(x_api_key, expected=ctx.settings.api_key):
        return None
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=UNAUTHORIZED_DETAIL,
    )
