"""
Restaurant Finder - FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       the module-level `app` is what uvicorn serves
       (uvicorn restaurant_finder.main:app, or python -m restaurant_finder).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────┐ ┌─────────┐ ┌────────┐ ┌──────┐ ┌──────┐│
    │  │ Req ID │→│ Logging │→│Size cap│→│ GZip │→│ CORS ││
    │  └────────┘ └─────────┘ └────────┘ └──────┘ └──────┘│
    │                                                     │
    │  Routes:                                            │
    │  ┌───────────────────┐ ┌──────────────┐ ┌────────┐  │
    │  │ /api/v1/restaurants│ │ /upload(s)  │ │/health │  │
    │  └───────────────────┘ └──────────────┘ └────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ DB/File→500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the uploads directory
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from restaurant_finder import __version__
from restaurant_finder.config import settings
from restaurant_finder.database import dispose_engine
from restaurant_finder.exceptions import (
    DatabaseError,
    FileStorageError,
    NotFoundError,
    ValidationError,
)
from restaurant_finder.middleware.logging import RequestLoggingMiddleware
from restaurant_finder.middleware.request_id import RequestIDMiddleware, request_id_var
from restaurant_finder.middleware.upload_limit import UploadSizeLimitMiddleware
from restaurant_finder.routes import health, restaurants, upload
from restaurant_finder.services.upload_service import upload_service

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s to stdout.
    Called once during startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Per-request access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Restaurant Finder %s starting up...", __version__)

    upload_service.ensure_directories()
    logger.info("Uploads directory: %s", upload_service.images_dir)

    logger.info("Server is up running and listening on port %d", settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Restaurant Finder shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int, message: str, details: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    content = {"status": "Error", "error": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error body.

    Handler hierarchy:
        ValidationError / UploadError → 400 Bad Request
        RequestValidationError        → 400 Bad Request (malformed id or body)
        NotFoundError                 → 404 Not Found
        DatabaseError                 → 500 (generic message, context logged)
        FileStorageError              → 500 (context logged)
        Exception (fallback)          → 500 (traceback logged)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning("[%s] Malformed request: %s", request_id_var.get(""), errors)
        return _error_response(400, "Invalid request", {"errors": errors})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, "Internal server error")

    @app.exception_handler(FileStorageError)
    async def handle_file_storage_error(request: Request, exc: FileStorageError):
        logger.error(
            "[%s] File storage error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Restaurant Finder API",
        description="CRUD API for restaurant listings with image uploads.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → UploadSizeLimit → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(UploadSizeLimitMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(restaurants.router)
    app.include_router(upload.router)
    app.include_router(health.router)

    return app


app = create_app()
