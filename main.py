"""
main.py
-------
FastAPI application factory and entry point.

Application lifecycle:
  1. App is created by create_application().
  2. lifespan context manager runs on startup / shutdown.
  3. Routers are registered with their URL prefixes.
  4. Exception handlers map the access error taxonomy to JSON responses
     and hide store/internal error text from callers.

Run with:
    uvicorn main:app --reload              # development
    uvicorn main:app --workers 4           # production (no --reload)
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from jobboard.api.routes import (
    admin_applications,
    admin_jobs,
    applications,
    auth,
    favorites,
    jobs,
    messages,
    reviews,
    super_admin,
    team,
)
from jobboard.core.config import settings
from jobboard.core.errors import AccessError, NotAuthenticatedError, UpstreamFailureError
from jobboard.core.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
)
from jobboard.db.session import engine

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Startup / shutdown lifecycle hook.

    Startup:  configure structured logging.
    Shutdown: dispose the async engine (graceful connection pool drain).
    """
    configure_logging()
    logger.info(
        "Starting up",
        app=settings.APP_NAME,
        env=settings.APP_ENV,
        debug=settings.DEBUG,
        staff_can_write=settings.STAFF_CAN_WRITE,
    )
    yield
    logger.info("Shutting down, disposing DB engine")
    await engine.dispose()


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Multi-tenant job board backend with centralized tenant "
            "authorization and row-scoped data access."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Request-scoped log context ────────────────────────────────────────────
    @app.middleware("http")
    async def request_context(request: Request, call_next):
        clear_request_context()
        bind_request_context(
            request_id=request.headers.get("X-Request-ID") or str(uuid.uuid4()),
            path=request.url.path,
            method=request.method,
        )
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(jobs.router)
    app.include_router(applications.router)
    app.include_router(messages.router)
    app.include_router(favorites.router)
    app.include_router(reviews.router)
    app.include_router(admin_jobs.router)
    app.include_router(admin_applications.router)
    app.include_router(team.router)
    app.include_router(super_admin.router)

    # ── Exception Handlers ────────────────────────────────────────────────────

    @app.exception_handler(AccessError)
    async def access_error_handler(request: Request, exc: AccessError) -> JSONResponse:
        headers = None
        if isinstance(exc, NotAuthenticatedError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=headers,
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.error(
            "Data store failure",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=UpstreamFailureError.status_code,
            content={"detail": UpstreamFailureError.default_detail},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # ── Health Check ──────────────────────────────────────────────────────────

    @app.get("/health", tags=["Health"], summary="Service health check")
    async def health() -> dict:
        return {"status": "ok", "app": settings.APP_NAME, "env": settings.APP_ENV}

    return app


app = create_application()
