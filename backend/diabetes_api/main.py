"""
Diabetes Diagnosis API — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       bound to one `Database` handle.
Who:   uvicorn (`uvicorn diabetes_api.main:app`, or the `diabetes-api`
       console script) and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────┐ ┌──────┐                     │
    │  │  Access  │→│ GZip │→│ CORS │                     │
    │  └──────────┘ └──────┘ └──────┘                     │
    │                                                     │
    │  Routes:                                            │
    │  /health /test-db /admin/login /api/*               │
    │  /  → static frontend (when the directory exists)   │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ Auth→401 │ 404/405→404 │ DB→500   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate configuration, log the bind address
    Shutdown: dispose the connection pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from diabetes_api import __version__
from diabetes_api.config import settings
from diabetes_api.database import Database
from diabetes_api.exceptions import (
    AuthError,
    DatabaseError,
    DiabetesApiError,
    NotFoundError,
    ValidationError,
)
from diabetes_api.middleware.access import AccessLogMiddleware, request_id_var
from diabetes_api.routes import admin, diagnosis, health, resources, stats

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Terjadi kesalahan pada server"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout, which container platforms collect.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("Diabetes Diagnosis API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health and /test-db help diagnose the deployment
        logger.error("Configuration error: %s", str(e))

    logger.info("Database: %s", settings.sqlalchemy_url.render_as_string(hide_password=True))
    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("=" * 60)

    yield

    logger.info("Diabetes Diagnosis API shutting down...")
    await app.state.database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, **extra) -> dict:
    body = {"error": error}
    body.update({k: v for k, v in extra.items() if v is not None})
    rid = request_id_var.get("")
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and JSON bodies.

    Handler table:
        RequestValidationError  → 400 as ValidationError (missing/mistyped body fields)
        AuthError               → 401 {"error": "Login gagal"}
        NotFoundError / 404 / 405 → 404 {"error": "Endpoint tidak ditemukan"}
        DatabaseError           → 500 {"error", "message"}
        DiabetesApiError (base) → its status_code (ValidationError → 400)
        Exception (fallback)    → 500 {"error", "message"}

    Driver and exception messages appear in "message" only when
    `settings.expose_error_details` is on.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        details = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("Invalid request body on %s: %s", request.url.path, details)
        error = ValidationError(field=details[0]["field"] if details else None)
        return JSONResponse(
            status_code=error.status_code,
            content=_error_body(error.message, details=details),
        )

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError):
        return JSONResponse(status_code=401, content=_error_body(exc.message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # A route is method + path: a known path with the wrong method is
        # as unmatched as an unknown path (this includes StaticFiles' 405)
        if exc.status_code in (404, 405):
            error = NotFoundError()
            return JSONResponse(status_code=error.status_code, content=_error_body(error.message))
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error("Database error on %s: %s | Context: %s", request.url.path, exc.message, exc.context)
        message = exc.detail if settings.expose_error_details else GENERIC_SERVER_ERROR
        return JSONResponse(status_code=500, content=_error_body(exc.message, message=message))

    @app.exception_handler(DiabetesApiError)
    async def handle_app_error(request: Request, exc: DiabetesApiError):
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("Unexpected error on %s: %s", request.url.path, str(exc), exc_info=True)
        message = str(exc) if settings.expose_error_details else None
        return JSONResponse(
            status_code=500,
            content=_error_body(GENERIC_SERVER_ERROR, message=message or GENERIC_SERVER_ERROR),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    database: Optional[Database] = None,
    frontend_dir: Optional[str] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database:     Connection-pool handle; built from settings when omitted
        frontend_dir: Static frontend directory; defaults to settings.frontend_dir.
                      Mounted at "/" only if it exists.
    """
    app = FastAPI(
        title="Diabetes Diagnosis API",
        description=(
            "Stores users, symptoms, diagnoses and recommendations for a diabetes "
            "self-assessment tool and scores submitted symptom lists."
        ),
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database or Database.from_settings(settings)

    # Last added runs first: Access → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials="*" not in settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(AccessLogMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(admin.router)
    app.include_router(resources.router)
    app.include_router(diagnosis.router)
    app.include_router(stats.router)

    # Mounted last so API routes win; unknown paths fall through to the 404 handler
    static_path = Path(frontend_dir or settings.frontend_dir)
    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=str(static_path), html=True), name="frontend")
        logger.info("Serving frontend from %s", static_path.resolve())

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run("diabetes_api.main:app", host=settings.host, port=settings.port)
