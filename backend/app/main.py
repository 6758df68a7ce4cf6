"""
Restaurant Ordering API: FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, error mapping and
       lifecycle management in one place.
How:   create_app() returns a configured FastAPI instance. uvicorn serves the
       module-level `app` (uvicorn app.main:app); tests call create_app()
       with their own Settings and session factory.

Application Architecture:
    ┌──────────────────────────────────────────────────────────────┐
    │                         FastAPI App                          │
    │                                                              │
    │  Middleware:  Request ID → Access Log → GZip → CORS          │
    │                                                              │
    │  Public:      POST /login   POST /api/users   /ping /health  │
    │  Gated:       /logout /profile  /api/{users,menus,orders,    │
    │               payments,restaurants,shippings}                │
    │                                                              │
    │  Errors:      ValidationError→400  AuthError→401             │
    │               NotFoundError→404    ConflictError→409         │
    │               DatabaseError→500    anything else→500         │
    └──────────────────────────────────────────────────────────────┘

Shared state (app.state):
    settings         the Settings instance the app was built with
    engine           AsyncEngine, or None when a session factory was injected
    session_factory  async_sessionmaker used by get_db_session
    auth_service     bcrypt + JWT primitives configured from settings
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import Settings, settings as default_settings
from app.database import create_engine_from_settings, create_session_factory
from app.exceptions import (
    AuthError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    RestaurantAPIError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import auth, health, menus, orders, payments, restaurants, shippings, users
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(config: Settings) -> None:
    """
    Configure the root logger once, at startup.

    Format: 2026-01-15T12:00:00 [INFO] restaurant_api.access: GET /api/menus 200 ...
    Output goes to stdout so container runtimes collect it.
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, report configuration problems.
    Shutdown: dispose the engine this app created (an injected session
    factory belongs to the caller and is left alone).
    """
    config: Settings = app.state.settings
    setup_logging(config)
    logger.info("=" * 60)
    logger.info("Restaurant Ordering API %s starting up...", __version__)

    try:
        config.validate_required_for_production()
    except ValueError as e:
        # Keep serving; /health stays reachable while the config is fixed
        logger.error("Configuration error: %s", e)

    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Restaurant Ordering API shutting down...")
    if app.state.engine is not None:
        await app.state.engine.dispose()
        logger.info("Database connections closed")
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, status: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": status, "message": message, **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map the exception hierarchy to the `{status, message}` envelope.

        ValidationError / RequestValidationError → 400 bad_request
        AuthError (all kinds)                    → 401 error "Unauthorized"
        NotFoundError                            → 404 not_found
        ConflictError                            → 409 conflict
        DatabaseError                            → 500 error "Database error"
        unmatched routes / methods               → 404 / 405 envelope
        anything else                            → 500 error

    Server-side context (driver errors, auth failure kind) is logged, and
    only DatabaseError may add `detail`, and only when EXPOSE_ERROR_DETAIL
    is enabled.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.info("[%s] Validation error: %s %s", request_id_var.get(""), exc.message, exc.context)
        return _error(400, "bad_request", exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        """Malformed JSON or a wrongly typed field: 400 like every other bad input."""
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"Invalid value for '{location}': {first.get('msg')}" if location else first.get("msg")
        else:
            message = "Invalid request"
        logger.info("[%s] Request validation failed: %s", request_id_var.get(""), errors)
        return _error(400, "bad_request", message)

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError):
        # The gate has already logged exc.reason; the body never reveals it
        return JSONResponse(
            status_code=401,
            content={"status": "error", "message": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning("[%s] Conflict: %s %s", request_id_var.get(""), exc.message, exc.context)
        return _error(409, "conflict", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        if request.app.state.settings.expose_error_detail and exc.context.get("detail"):
            return _error(500, "error", exc.message, detail=exc.context["detail"])
        return _error(500, "error", exc.message)

    @app.exception_handler(RestaurantAPIError)
    async def handle_app_error(request: Request, exc: RestaurantAPIError):
        logger.error("[%s] Unhandled application error: %s | Context: %s",
                     request_id_var.get(""), exc.message, exc.context)
        return _error(500, "error", exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        status = "not_found" if exc.status_code == 404 else "error"
        message = "Not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": status, "message": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), exc, exc_info=True)
        return _error(500, "error", "Internal server error")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> FastAPI:
    """
    Assemble the application.

    Args:
        settings:        configuration; defaults to the environment-loaded one
        session_factory: pre-built session factory (tests pass one bound to
                         an in-memory database); when omitted an engine is
                         created from settings.database_url
    """
    config = settings or default_settings

    app = FastAPI(
        title="Restaurant Ordering API",
        description=(
            "Restaurant ordering backend: bearer-token authentication and CRUD for "
            "users, restaurants, menus, orders, payments and shippings."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Shared State ──────────────────────────────────────────────────────
    engine = None
    if session_factory is None:
        engine = create_engine_from_settings(config)
        session_factory = create_session_factory(engine)
    app.state.settings = config
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.auth_service = AuthService(config)

    # ── Middleware ────────────────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Exception Handlers ────────────────────────────────────────────────
    register_exception_handlers(app)

    # ── Routes ────────────────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(restaurants.router)
    app.include_router(menus.router)
    app.include_router(orders.router)
    app.include_router(payments.router)
    app.include_router(shippings.router)

    return app


# uvicorn app.main:app
app = create_app()
