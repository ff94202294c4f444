"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import condition_builder.entries  # noqa: F401  registers the built-in condition types
from condition_builder import __version__
from condition_builder.conditions import registered_handler_count, router as conditions_router
from condition_builder.core import configure_logging, get_settings, load_extensions

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    configure_logging("DEBUG" if settings.debug else settings.log_level)
    logger.info("Starting %s...", settings.app_name)

    # Handlers must be in place before any condition resolves its rule types
    load_extensions(settings.extensions)
    logger.info("Rule type handlers registered: %d", registered_handler_count())

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Build, validate, and serialize rule-based conditions",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(conditions_router)  # /conditions

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
