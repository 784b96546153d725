"""Social API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly under /<api_version> (no auto-discovery)
    - Global error handlers map ApiError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Middleware added inner-first: request context, secure headers, then CORS outermost
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.middleware import RequestContextMiddleware, SecureHeadersMiddleware
from app.api.router import build_api_router
from app.config import get_settings
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Social API started, serving /{settings.api_version}")
    yield
    logger.info("Social API shutting down")
    await close_db()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Social API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        RequestContextMiddleware,
        timeout_seconds=settings.request_timeout_seconds,
        timeout_prefix=f"/{settings.api_version}",
    )
    app.add_middleware(SecureHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-Id"],
    )

    register_error_handlers(app)
    app.include_router(build_api_router(), prefix=f"/{settings.api_version}")
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
