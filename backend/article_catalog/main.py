"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from article_catalog.config import Settings, get_settings
from article_catalog.infrastructure.logging.log_config import setup_logging
from article_catalog.infrastructure.memory import InMemoryArticleRepository, SAMPLE_ARTICLES
from article_catalog.presentation.api.errors import register_exception_handlers
from article_catalog.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def build_article_repository(settings: Settings) -> InMemoryArticleRepository:
    """Create the process-wide article store, optionally loaded with samples."""
    repository = InMemoryArticleRepository()
    if settings.seed_sample_data:
        repository.seed(SAMPLE_ARTICLES)
    return repository


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the catalog size."""
    setup_logging(app.state.settings)
    logger.info(
        "%s %s started with %d articles",
        app.state.settings.app_title,
        app.state.settings.app_version,
        len(app.state.article_repository),
    )

    yield

    logger.info("Shutting down")


def create_app(
    settings: Settings | None = None,
    repository: InMemoryArticleRepository | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    Each call gets its own article store unless one is passed in, so tests
    can run against isolated instances.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.article_repository = (
        repository if repository is not None else build_article_repository(settings)
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "article_catalog.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
    )
