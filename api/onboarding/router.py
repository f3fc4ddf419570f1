"""
Onboarding API endpoints.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from core.access import require_api_key
from core.context import AppContext, get_context
from core.db import StoreError
from verticals import catalog

from . import content, repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.get("/api/onboarding/steps")
async def onboarding_steps(ctx: AppContext = Depends(get_context)) -> dict:
    configured = ctx.settings.store_configured
    return {
        "status": "connected" if configured else "unconfigured",
        "steps": content.list_steps(),
        "summary": (
            "Supabase is wired—output the steps directly to your UI."
            if configured
            else "Supabase credentials missing. Steps are safe to display offline."
        ),
    }


@router.post("/api/onboarding/progress")
async def onboarding_progress(
    request: schemas.ProgressRequest | None = None,
    ctx: AppContext = Depends(get_context),
):
    if request is None:
        request = schemas.ProgressRequest()
    if not request.user_id or not request.step_id:
        raise HTTPException(status_code=400, detail="user_id and step_id are required")

    record = {
        "user_id": request.user_id,
        "step_id": request.step_id,
        "completed": request.completed if request.completed is not None else False,
        "metadata": request.metadata if request.metadata is not None else {},
        "business_type": catalog.normalize(request.business_type),
        "created_at": datetime.now(timezone.utc),
    }
    ctx.progress_buffer.append(record)

    if not ctx.settings.store_configured:
        return JSONResponse(
            status_code=202,
            content=jsonable_encoder(
                {
                    "success": True,
                    "stored": False,
                    "message": "Supabase credentials missing; onboarding progress cached in memory for development.",
                    "record": record,
                }
            ),
        )

    try:
        row = await repository.insert_progress(ctx.db, record)
    except StoreError as exc:
        logger.error(
            "onboarding_progress_failed user_id=%s step_id=%s error=%s",
            record["user_id"],
            record["step_id"],
            exc,
        )
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return {
        "success": True,
        "stored": True,
        "message": "Progress saved",
        "record": row,
    }
