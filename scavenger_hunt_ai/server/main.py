"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(rate limiting, CORS, security headers, request timing), registers exception
handlers and includes all API routers. It serves as the root of the web server.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scavenger_hunt_ai import __version__
from scavenger_hunt_ai.core.database import init_db
from scavenger_hunt_ai.core.logging_config import get_logger, setup_logging
from scavenger_hunt_ai.core.monitoring import initialize_logfire

from .api.v1 import health, hunts, ratings, realtime, users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestTimingMiddleware, SecurityHeadersMiddleware, build_limiter, setup_rate_limiting

# Initialize logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing database tables on startup.
    """
    # Startup
    try:
        logger.info("Starting up Scavenger Hunt AI Server...")
        await init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    # Shutdown
    logger.info("Shutting down Scavenger Hunt AI Server...")


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    Scavenger Hunt AI Server API

    This API provides the backend services for the children's scavenger hunt app.
    It supports creating players, generating themed hunts with staged AI helpers,
    playing and rating hunts, and streaming generation progress in real time.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

setup_rate_limiting(app, build_limiter())

cors = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors.origins,
    allow_credentials=cors.allow_credentials,
    allow_methods=cors.allow_methods,
    allow_headers=cors.allow_headers,
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestTimingMiddleware)

setup_exception_handlers(app)
initialize_logfire(app)

app.include_router(health.router, tags=["health"])
app.include_router(users.router, prefix=f"{constant.API_V1_STR}/users", tags=["users"])
app.include_router(hunts.router, prefix=f"{constant.API_V1_STR}/hunts", tags=["hunts"])
app.include_router(ratings.router, prefix=f"{constant.API_V1_STR}/ratings", tags=["ratings"])
app.include_router(realtime.router, tags=["realtime"])


def run() -> None:
    """Run the server with uvicorn using the configured host and port."""
    uvicorn.run(
        "scavenger_hunt_ai.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
