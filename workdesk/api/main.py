"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize the FastAPI application with metadata (title, version)
  - Configure middleware (body limit, request context, CORS)
  - Mount the work-hours / notes / users routers under /api/v1
  - Expose the health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - RequestContextMiddleware / BodyLimitMiddleware: crosscutting.middleware
  - interfaces.api.http.router: business endpoints
  - exception_handlers: envelope translation of every error

Notes:
  - Middleware order matters: BodyLimit -> RequestContext -> CORS -> routes
  - The DB pool is skipped in test environments (in-memory repositories)
  - /healthz follows Kubernetes health check convention
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import BodyLimitMiddleware, RequestContextMiddleware
from ..infrastructure.db.pool import close_pool, get_pool, init_pool
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and initializes pool."""
    settings = get_settings()

    if settings.is_production():
        settings.validate_security_requirements()

    use_db = not settings.is_test()
    if use_db:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    try:
        logger.info(
            "Workdesk API starting up",
            extra={
                "app_env": settings.app_env,
                "fake_mail": settings.fake_mail,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        yield
    finally:
        if use_db:
            close_pool()
        logger.info("Workdesk API shutting down")


def _get_allowed_origins() -> list[str]:
    """Get CORS origins from settings, with fallback for import-time errors."""
    try:
        return get_settings().get_allowed_origins_list()
    except Exception:
        return ["http://localhost:3000"]


app = FastAPI(
    title="Workdesk API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "Mobile + OTP accounts"},
        {"name": "work-hours", "description": "Work hours log, export and email"},
        {"name": "notes", "description": "Personal notes"},
    ],
)

# R: Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
# 3. BodyLimitMiddleware - rejects oversized bodies
app.add_middleware(BodyLimitMiddleware)
app.add_middleware(RequestContextMiddleware)

try:
    _cors_allow_credentials = get_settings().cors_allow_credentials
except Exception:
    _cors_allow_credentials = False
app.add_middleware(
    CORSMiddleware,
    allow_origins=_get_allowed_origins(),
    allow_credentials=_cors_allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

app.include_router(router, prefix="/api/v1")

register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    Liveness plus DB reachability.

    Returns:
        ok: True if the database answered (always True without a pool)
        db: "connected", "disconnected" or "skipped"
        request_id: Correlation ID for this request
    """
    db_status = "skipped"
    if not get_settings().is_test():
        db_status = "disconnected"
        try:
            with get_pool().connection() as conn:
                conn.execute("SELECT 1")
            db_status = "connected"
        except Exception as e:
            logger.warning("Health check: DB unavailable", extra={"error": str(e)})

    return {
        "ok": db_status != "disconnected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }
