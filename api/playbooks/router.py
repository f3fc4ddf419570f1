"""
Playbook run API endpoints.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from core.access import require_api_key
from core.context import AppContext, get_context
from core.db import StoreError
from verticals import catalog

from . import repository

router = APIRouter(dependencies=[Depends(require_api_key)])


class PlaybookRunRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    playbook_id: str | None = Field(default=None, alias="playbookId")
    business_type: Any = None


@router.post("/api/playbook-run")
async def playbook_run(
    request: PlaybookRunRequest | None = None,
    ctx: AppContext = Depends(get_context),
) -> dict:
    if request is None:
        request = PlaybookRunRequest()
    if not request.playbook_id:
        raise HTTPException(status_code=400, detail="playbookId required")

    try:
        row = await repository.insert_run(
            ctx.db,
            playbook_id=request.playbook_id,
            business_type=catalog.normalize(request.business_type),
            created_at=datetime.now(timezone.utc),
        )
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"success": True, "data": row}


@router.get("/api/playbook-stats")
async def playbook_stats(ctx: AppContext = Depends(get_context)) -> dict:
    try:
        rows = await repository.top_playbooks(ctx.db)
    except StoreError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {
        "stats": [
            {"playbook_id": str(row["playbook_id"]), "count": int(row["count"])}
            for row in rows
        ]
    }
