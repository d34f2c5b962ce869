"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount router with feed endpoints under /v1 prefix
  - Expose info, health check and metrics endpoints
  - Own the feed lifecycle: initialize/seed on startup, run the batch
    flusher, close subscriptions and the notifier on shutdown

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - routes.router: feed endpoints
  - container.get_feed_context: process-wide feed state

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - State is memory-resident and lost on restart

Notes:
  - /v1 prefix allows API versioning
  - /healthz follows Kubernetes health check convention
  - /metrics exposes Prometheus metrics
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import get_settings
from .container import get_feed_context
from .exception_handlers import register_exception_handlers
from .logger import configure_logging, logger
from .metrics import get_metrics_response
from .middleware import RequestContextMiddleware
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and prepares the feed."""
    # This will raise ValidationError if env vars are invalid
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)

    context = get_feed_context()
    context.initialize()

    if context.dispatcher.batch_mode:
        context.flusher.start()

    logger.info(
        "Kudos API starting up",
        extra={
            "app_env": settings.app_env,
            "seed_fixtures": settings.seed_fixtures,
            "batch_mode": context.dispatcher.batch_mode,
            "batch_interval_seconds": settings.notify_batch_interval_seconds,
            "slack_enabled": bool(settings.slack_webhook_url.strip()),
        },
    )
    yield

    await context.flusher.stop()
    context.pubsub.close_all()
    await context.notifier.aclose()
    logger.info(
        "Kudos API shutting down",
        extra={"pending_notifications": len(context.queue)},
    )


# R: Create FastAPI application instance with API metadata
app = FastAPI(
    title="Employee Recognition API",
    version=__version__,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "directory", "description": "Users, teams and profile"},
        {"name": "recognitions", "description": "Recognition feed"},
        {"name": "analytics", "description": "Team and organization analytics"},
        {"name": "subscriptions", "description": "Live feeds (Server-Sent Events)"},
    ],
)

# R: Add request context middleware
app.add_middleware(RequestContextMiddleware)

# R: Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().get_allowed_origins_list(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=[
        "Content-Type",
        "Authorization",
        "X-User-Id",
        "X-Request-Id",
    ],
)

# R: Register API routes under /v1 prefix for versioning
app.include_router(router, prefix="/v1")

# R: Register exception handlers for structured error responses
register_exception_handlers(app)


@app.get("/", tags=["meta"])
def api_info():
    """R: Service banner with the main entry points."""
    return {
        "message": "Employee Recognition API",
        "version": __version__,
        "endpoints": {
            "api": "/v1",
            "docs": "/docs",
            "health": "/healthz",
            "metrics": "/metrics",
            "subscriptions": "/v1/subscriptions",
        },
    }


# R: Health check endpoint for monitoring/orchestration (Kubernetes, Docker)
@app.get("/healthz", tags=["meta"])
def healthz():
    context = get_feed_context()
    return {
        "ok": True,
        "users": len(context.directory.list_users()),
        "teams": len(context.directory.list_teams()),
        "recognitions": context.recognitions.count(),
        "subscribers": context.pubsub.listener_count(),
        "batch_mode": context.dispatcher.batch_mode,
        "pending_notifications": len(context.queue),
        "queue_state": context.queue.state.value,
        "flusher_running": context.flusher.running,
    }


@app.get("/metrics", tags=["meta"])
def metrics():
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
