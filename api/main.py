from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.access import API_KEY_HEADER, UNAUTHORIZED_DETAIL, is_authorized
from core.config import Settings, configure_logging, load_settings
from core.context import AppContext
from core.db import Database, StoreError
from dashboard import router as dashboard_router
from delivery import router as delivery_router
from delivery.notifier import EmailNotifier
from interactions import router as interactions_router
from onboarding import router as onboarding_router
from onboarding.buffer import ProgressBuffer
from playbooks import router as playbooks_router
from status import router as status_router
from verticals.stats import VerticalStats

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    ctx: AppContext = app.state.ctx
    # Initialize the DB pool once per process. A dead store must not stop startup.
    try:
        await ctx.db.init_pool()
    except StoreError as exc:
        logger.error("db_pool_init_failed error=%s", exc)

    seed = await ctx.stats.seed()
    if seed.error:
        logger.error("vertical_stats_seed_failed error=%s", seed.error)
    else:
        logger.info("vertical_stats_seeded seeded=%s rows=%s", seed.seeded, seed.rows)

    logger.info(
        "experience_agent_started port=%s environment=%s store=%s email=%s api_key_enforced=%s",
        ctx.settings.port,
        ctx.settings.environment,
        "configured" if ctx.settings.store_configured else "unconfigured",
        "configured" if ctx.settings.email_configured else "unconfigured",
        ctx.settings.enforce_api_key,
    )
    try:
        yield
    finally:
        await ctx.db.close_pool()


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Bodies are parsed before route dependencies run, so the gate is checked here as well.
    settings: Settings = request.app.state.ctx.settings
    if settings.enforce_api_key and not is_authorized(
        request.headers.get(API_KEY_HEADER), expected=settings.api_key
    ):
        return JSONResponse(status_code=401, content={"error": UNAUTHORIZED_DETAIL})
    return await request_validation_exception_handler(request, exc)


def create_app(
    settings: Settings | None = None,
    *,
    db: Database | None = None,
    notifier: EmailNotifier | None = None,
) -> FastAPI:
    settings = settings or load_settings()
    db = db if db is not None else Database(settings.database_url, password=settings.database_api_key)

    app = FastAPI(title="Experience Agent", version="1.0.0", lifespan=lifespan)
    app.state.ctx = AppContext(
        settings=settings,
        db=db,
        stats=VerticalStats(db),
        notifier=notifier if notifier is not None else EmailNotifier(settings),
        progress_buffer=ProgressBuffer(),
    )
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(status_router.router, tags=["status"])
    app.include_router(interactions_router.router, tags=["interactions"])
    app.include_router(onboarding_router.router, tags=["onboarding"])
    app.include_router(delivery_router.router, tags=["delivery"])
    app.include_router(dashboard_router.router, tags=["dashboard"])
    app.include_router(playbooks_router.router, tags=["playbooks"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "message": "Experience Agent is running"}

    return app


def run() -> None:
    settings = load_settings()
    configure_logging(settings)
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
