"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount the users router under /v1
  - Expose health and readiness endpoints

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - interfaces.api.http.router: user lifecycle endpoints

Notes:
  - Middleware order matters: RequestContext → CORS → routes
  - /healthz and /readyz follow the Kubernetes convention
  - The DB pool is only opened when Settings.uses_memory_store() is false
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..application.dev_seed_admin import ensure_dev_admin
from ..container import get_password_hasher, get_user_repository
from ..crosscutting.config import get_settings
from ..crosscutting.logger import configure_logging, logger
from ..crosscutting.middleware import REQUEST_ID_HEADER, RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, init_pool
from ..interfaces.api.http.router import build_router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Opens the pool and seeds the dev admin."""
    settings = get_settings()
    uses_pool = not settings.uses_memory_store()

    if uses_pool:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        try:
            ensure_dev_admin(
                settings,
                user_repo=get_user_repository(),
                password_hasher=get_password_hasher(),
                env=os.environ,
            )
        except Exception as e:
            logger.error("Startup failed", extra={"error": str(e)})
            raise

        logger.info(
            "User Lifecycle API starting up",
            extra={
                "app_env": settings.app_env,
                "user_store": settings.user_store,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )

        yield

    finally:
        if uses_pool:
            close_pool()
        logger.info("User Lifecycle API shutting down")


def _store_status() -> str:
    try:
        if get_user_repository().ping():
            return "connected"
    except Exception as e:
        logger.warning("Health check: store unavailable", extra={"error": str(e)})
    return "disconnected"


def create_app() -> FastAPI:
    """Build the FastAPI application (routers, middleware, handlers)."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    app = FastAPI(
        title="User Lifecycle API",
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "users", "description": "User account lifecycle"},
        ],
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.include_router(build_router(), prefix="/v1")
    register_exception_handlers(app)

    @app.get("/healthz")
    def healthz(request: Request):
        """
        R: Liveness check that also pings the user store.

        Returns:
            ok: True if the store answered
            db: "connected" or "disconnected"
            request_id: Correlation ID for this request
        """
        db_status = _store_status()
        return {
            "ok": db_status == "connected",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    @app.get("/readyz")
    def readyz(request: Request):
        """R: Readiness check for the user store only."""
        db_status = _store_status()
        return {
            "ok": db_status == "connected",
            "db": db_status,
            "request_id": getattr(request.state, "request_id", None),
        }

    return app


app = create_app()
