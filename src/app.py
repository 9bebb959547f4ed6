"""
ORM Sample API
Composition root: builds the FastAPI application from explicit settings.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, get_settings
from database.connection import DbContextOptions
from database.context import ApplicationDbContext
from api.routes import home, health, authors, books
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

# (router, prefix, tags)
ROUTES = (
    (home.router, "", ["Home"]),
    (health.router, "/health", ["Health"]),
    (authors.router, "/api/authors", ["Authors"]),
    (books.router, "/api/books", ["Books"]),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    settings: Settings = app.state.settings
    options: DbContextOptions = app.state.db_context_options
    logger.info(f"Starting in {settings.env} against {options.masked_url}")

    if settings.database_ensure_created:
        async with ApplicationDbContext(options) as context:
            await context.ensure_created()

    yield

    # The registration may have been replaced after startup; dispose what is registered now
    await app.state.db_context_options.dispose()


def create_app(
    settings: Optional[Settings] = None,
    db_options: Optional[DbContextOptions] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Application settings (read from the environment when omitted)
        db_options: Persistence options (derived from settings.database_url when omitted)

    Returns:
        Configured FastAPI application with its persistence registration on app.state
    """
    if settings is None:
        settings = get_settings()
    if db_options is None:
        db_options = DbContextOptions.from_settings(settings)

    app = FastAPI(
        title="ORM Sample API",
        description="Sample wiring of FastAPI routes, dependency injection and a SQLAlchemy persistence context",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.db_context_options = db_options

    if settings.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    setup_error_handling(app)

    for router, prefix, tags in ROUTES:
        app.include_router(router, prefix=prefix, tags=tags)

    return app
