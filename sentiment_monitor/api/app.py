"""
FastAPI application factory.
"""

import time
import uuid
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sentiment_monitor import __version__
from sentiment_monitor.api.dependencies import cleanup_dependencies
from sentiment_monitor.api.middleware.timeout import TimeoutMiddleware
from sentiment_monitor.api.routes import (
    analyze,
    authors,
    comments,
    health,
    insights,
    snapshots,
    user_config,
)
from sentiment_monitor.config.settings import get_settings

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Sentiment monitor API starting up")

    settings = get_settings()
    if settings.tracing_enabled:
        from sentiment_monitor.observability.tracing import setup_tracing

        setup_tracing(
            service_name=settings.otel_service_name,
            otlp_endpoint=settings.otel_exporter_otlp_endpoint,
        )

    yield

    logger.info("Sentiment monitor API shutting down")
    await cleanup_dependencies()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    openapi_tags = [
        {"name": "health", "description": "Service health and metrics"},
        {"name": "comments", "description": "Feedback listing and submission"},
        {"name": "analysis", "description": "Ad-hoc sentiment classification"},
        {"name": "snapshots", "description": "Daily aggregates for charts"},
        {"name": "authors", "description": "Author directory"},
        {"name": "config", "description": "Per-user settings"},
        {"name": "insights", "description": "Suggestions, topics, geo and report exports"},
    ]

    app = FastAPI(
        title="Sentiment Monitor API",
        description="""
API behind the sentiment monitoring dashboard.

## Classification

Comments are scored when created, either by the Hugging Face
`siebert/sentiment-roberta-large-english` model (when a token is configured
and demo mode is off) or by a keyword heuristic.

## Authentication

Requires `X-API-KEY` header for all `/api` requests when `API_KEYS` is set.
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=openapi_tags,
    )

    # CORS (origins from CORS_ORIGINS env var, comma-separated)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["*"],
    )

    # Added before the logging middleware so the timeout wraps the whole request
    if settings.request_timeout_seconds > 0:
        app.add_middleware(
            TimeoutMiddleware,
            timeout_seconds=settings.request_timeout_seconds,
        )

    # Request logging, correlation ID, and tracing middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        from sentiment_monitor.observability.tracing import get_tracer, is_tracing_enabled

        request_id = (
            request.headers.get("X-Request-ID")
            or request.headers.get("X-Correlation-ID")
            or str(uuid.uuid4())
        )

        structlog.contextvars.bind_contextvars(request_id=request_id)

        start_time = time.perf_counter()

        try:
            if is_tracing_enabled():
                tracer = get_tracer("sentiment-monitor.api")
                with tracer.start_as_current_span(
                    f"{request.method} {request.url.path}",
                    attributes={
                        "http.method": request.method,
                        "http.url": str(request.url),
                        "http.route": request.url.path,
                        "http.request_id": request_id,
                    },
                ) as span:
                    response = await call_next(request)
                    duration = time.perf_counter() - start_time
                    span.set_attribute("http.status_code", response.status_code)
                    span.set_attribute("http.duration_ms", round(duration * 1000, 2))
            else:
                response = await call_next(request)
                duration = time.perf_counter() - start_time

            response.headers["X-Request-ID"] = request_id

            logger.info(
                "HTTP request",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            return response
        finally:
            structlog.contextvars.clear_contextvars()

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error_type": "internal"},
        )

    app.include_router(health.router, tags=["health"])
    if settings.metrics_enabled:
        app.include_router(health.metrics_router, tags=["health"])
    app.include_router(comments.router, tags=["comments"])
    app.include_router(analyze.router, tags=["analysis"])
    app.include_router(snapshots.router, tags=["snapshots"])
    app.include_router(authors.router, tags=["authors"])
    app.include_router(user_config.router, tags=["config"])
    app.include_router(insights.router, tags=["insights"])

    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "service": "Sentiment Monitor API",
            "version": __version__,
            "docs": "/docs",
        }

    return app
