"""
Open status endpoints: agent descriptor and store connectivity check.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.context import AppContext, get_context
from core.db import StoreError

AGENT_NAME = "Experience Agent"
AGENT_VERSION = "1.0.0"

router = APIRouter()


@router.get("/api/agent")
def agent_info(ctx: AppContext = Depends(get_context)) -> dict:
    return {
        "name": AGENT_NAME,
        "version": AGENT_VERSION,
        "status": "active",
        "database": "Supabase connected" if ctx.settings.store_configured else "Supabase unconfigured",
    }


@router.get("/api/test-db")
async def test_db(ctx: AppContext = Depends(get_context)):
    try:
        await ctx.db.fetch_val("SELECT 1")
    except StoreError as exc:
        return JSONResponse(status_code=500, content={"connected": False, "error": str(exc)})
    return {"connected": True, "message": "Supabase connection successful"}
