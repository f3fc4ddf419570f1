"""
Interaction API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from core.access import require_api_key
from core.context import AppContext, get_context
from core.db import StoreError

from . import repository, schemas, service

router = APIRouter()


@router.post("/api/interactions", dependencies=[Depends(require_api_key)])
async def create_interaction(
    request: schemas.InteractionRequest | None = None,
    ctx: AppContext = Depends(get_context),
) -> dict:
    if request is None:
        request = schemas.InteractionRequest()
    if not request.user_id or not request.message:
        raise HTTPException(status_code=400, detail="user_id and message required")

    result = await service.log_interaction(
        ctx.db,
        ctx.stats,
        user_id=request.user_id,
        message=request.message,
        response=request.response,
        business_type=request.business_type,
    )
    if result.error is not None:
        raise HTTPException(status_code=500, detail=str(result.error))

    return {
        "success": True,
        "message": "Interaction saved",
        "data": result.data,
        "business_type": result.business_type,
    }


@router.get("/api/interactions/{user_id}")
async def list_user_interactions(
    user_id: str,
    ctx: AppContext = Depends(get_context),
) -> dict:
    try:
        rows = await repository.list_for_user(ctx.db, user_id)
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"success": True, "count": len(rows), "interactions": rows}
