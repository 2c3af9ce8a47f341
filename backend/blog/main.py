"""
Blog API - FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       the module-level `app` is what uvicorn serves (blog.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────┐
    │                    FastAPI App                       │
    │                                                      │
    │  Middleware:  Request ID → Access Log → CORS         │
    │                                                      │
    │  Routes:      GET /          /v1/categories[/{id}]   │
    │                                                      │
    │  Exception Handlers (all answer with ResultEnvelope):│
    │    RequestValidationError → 400                      │
    │    ValidationError        → 400                      │
    │    NotFoundError          → 404                      │
    │    StoreWriteError        → 500 (05XE7/05XE8/05XE9)  │
    │    InternalServerError    → 500 (05X04 ... 05X12)    │
    │                                                      │
    │  Anything unhandled: 500 (05X99) from the access-log │
    │  middleware, inside the request-ID scope             │
    └──────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blog import __version__
from blog.config import settings
from blog.database import dispose_engine
from blog.exceptions import (
    BlogError,
    NotFoundError,
    ValidationError,
)
from blog.middleware.logging import RequestLoggingMiddleware
from blog.middleware.request_id import RequestIDMiddleware, request_id_var
from blog.routes import categories, home
from blog.schemas.category import ResultEnvelope
from blog.validation import extract_error_messages

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2024-01-15T12:00:00 [INFO] blog.access: GET /v1/categories 200 ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Blog API %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Blog API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _envelope_response(status_code: int, errors: list) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ResultEnvelope.failure(errors).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to status codes and error envelopes.

    Every failure leaves the API as {"data": null, "errors": [...]}.
    Context dicts and stack traces are logged server-side only.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body or path could not be bound (malformed JSON, wrong types, bad id)."""
        errors = extract_error_messages(exc.errors()) or ["Requisição inválida"]
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), errors)
        return _envelope_response(400, errors)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.errors)
        return _envelope_response(400, exc.errors)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _envelope_response(404, exc.errors)

    @app.exception_handler(BlogError)
    async def handle_blog_error(request: Request, exc: BlogError):
        """StoreWriteError and InternalServerError: coded 500 envelopes."""
        logger.error(
            "[%s] %s: %s | Context: %s",
            request_id_var.get(""),
            type(exc).__name__,
            exc.detail,
            exc.context,
        )
        return _envelope_response(exc.status_code, exc.errors)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    app = FastAPI(
        title="Blog API",
        description="Category CRUD API with uniform {data, errors} response envelopes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(home.router)
    app.include_router(categories.router)

    return app


app = create_app()
