"""FastAPI application factory.

Usage:
    fastapi dev src/swimlog/api/app.py
    fastapi run src/swimlog/api/app.py
"""

from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request

from swimlog import __version__, bind_context, clear_context, configure_logging, get_logger
from swimlog.api.routes import health_router, teams_router, times_router, users_router
from swimlog.config import get_settings

logger = get_logger(__name__)

API_PREFIX = "/api/v1"
REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup; log shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level, settings.resolved_log_format.value)
    logger.info(
        "app_starting",
        version=__version__,
        environment=settings.environment.value,
        database_configured=settings.has_supabase,
    )
    yield
    logger.info("app_shutdown")


async def bind_request_context(request: Request, call_next):
    """Tag every log line of a request with its request id and path."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex[:12]
    clear_context()
    bind_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_context()
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def create_app() -> FastAPI:
    """Build the API and mount its routers."""
    settings = get_settings()

    app = FastAPI(
        title="Swimlog API",
        description="Record and review swim practice times",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
    )
    app.middleware("http")(bind_request_context)

    app.include_router(health_router)
    for router in (times_router, teams_router, users_router):
        app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()
