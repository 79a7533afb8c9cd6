"""Recipe Catalog API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RecipeCatalogError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - Settings are an explicit argument of create_app, stored on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) as the composition root: tests and scripts build an
      app from a Settings value instead of mutating process-wide config
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipe_catalog.api.error_handlers import register_error_handlers
from recipe_catalog.api.routes import authors, ingredients, recipes
from recipe_catalog.config import Settings, get_settings
import recipe_catalog.infrastructure.database as database
from recipe_catalog.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application from an explicit Settings value."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        database.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        logger.info("Recipe Catalog API started")
        yield
        if database.db_manager:
            await database.db_manager.dispose()
        logger.info("Recipe Catalog API shutting down")

    app = FastAPI(
        title="Recipe Catalog API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS — configured from settings, not hardcoded
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes — explicit registration
    app.include_router(authors.router)
    app.include_router(recipes.router)
    app.include_router(ingredients.router)

    register_error_handlers(app)
    return app


app = create_app()
