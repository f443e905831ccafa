"""rulechain — record validation service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rulechain import __version__
from rulechain.config import get_settings
from rulechain.exceptions import RecordDescriptionError
from rulechain.logging import configure_logging
from rulechain.api.router import api_router
from rulechain.validators import validation_engine

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)
    logger.info(
        "app_started",
        rule_count=len(validation_engine.registry),
        result_mode=validation_engine.mode.value,
    )

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="rulechain",
    description=(
        "Declarative record validation. Each field carries an ordered rule chain "
        "such as 'required|numeric|min:10'; the service reports every violation "
        "keyed by field."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(RecordDescriptionError)
async def record_error_handler(request: Request, exc: RecordDescriptionError):
    """Handle records that cannot be described as fields."""
    return JSONResponse(
        status_code=422,
        content={"error": "invalid_record", "message": str(exc)},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "rulechain",
        "version": __version__,
        "description": "Declarative per-field rule-chain validation",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
