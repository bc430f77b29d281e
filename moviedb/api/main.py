"""FastAPI application entry point.

Creates and configures the movie catalog REST API with
CORS, metrics and OpenAPI documentation.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from moviedb.api.database import get_engine
from moviedb.api.errors import register_exception_handlers
from moviedb.api.routers import movies, people, users
from moviedb.api.schemas import DatabaseComponentHealth, HealthResponse
from moviedb.monitoring.middleware import PrometheusMiddleware, mount_metrics
from moviedb.settings import settings
from moviedb.utils.logger import setup_logger

logger = setup_logger("api.main")

API_PREFIX = "/api/v1"

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Validates database connection on startup.
    """
    _verify_database_connection()
    logger.info("%s %s started", settings.api.title, settings.api.version)
    yield


def _verify_database_connection() -> None:
    """Verify database is accessible on startup."""
    engine = get_engine()
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="Catalog of movies, people and ratings",
        lifespan=lifespan,
        docs_url="/",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    _configure_cors(app)
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)
    register_exception_handlers(app)
    _register_routers(app)
    return app


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_methods=["GET", "PUT"],
        allow_headers=["Authorization", "Content-Type"],
    )


def _register_routers(app: FastAPI) -> None:
    """Register API routers and the health endpoint."""
    app.include_router(movies.router, prefix=API_PREFIX)
    app.include_router(people.router, prefix=API_PREFIX)
    app.include_router(users.router, prefix=API_PREFIX)
    app.add_api_route(
        f"{API_PREFIX}/health",
        health_check,
        methods=["GET"],
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )


# =============================================================================
# HEALTH
# =============================================================================


def health_check() -> HealthResponse:
    """Health check endpoint (no authentication required).

    Returns:
        API status with database connectivity.
    """
    database = _check_database()
    return HealthResponse(
        status="healthy" if database.connected else "degraded",
        version=settings.api.version,
        database=database,
    )


def _check_database() -> DatabaseComponentHealth:
    """Check database connection status."""
    try:
        engine = get_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        logger.warning("Health check: database unreachable", exc_info=True)
        return DatabaseComponentHealth(connected=False)
    pool = engine.pool
    pool_available = pool.checkedin() if hasattr(pool, "checkedin") else None
    return DatabaseComponentHealth(connected=True, pool_available=pool_available)


app = create_app()
