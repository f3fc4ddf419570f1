"""
Dashboard API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.access import require_api_key
from core.context import AppContext, get_context
from core.db import StoreError

from . import service

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.get("/api/dashboard/summary")
async def dashboard_summary(ctx: AppContext = Depends(get_context)):
    if not ctx.settings.store_configured:
        return service.baseline_summary(configured=False)

    try:
        return await service.summary(ctx.db, ctx.stats)
    except StoreError as exc:
        logger.error("dashboard_summary_failed error=%s", exc)
        return JSONResponse(
            status_code=500,
            content=jsonable_encoder(
                {
                    "error": str(exc),
                    **service.baseline_summary(configured=True),
                    "status": "error",
                }
            ),
        )


@router.get("/api/dashboard/verticals")
async def dashboard_verticals(ctx: AppContext = Depends(get_context)) -> dict:
    return {"types": ctx.stats.breakdown(include_goal=True)}
