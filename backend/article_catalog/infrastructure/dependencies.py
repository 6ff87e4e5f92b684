"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.application.services import ArticleService


def get_article_repository(request: Request) -> ArticleRepository:
    """Returns the process-wide article store built by the application factory."""
    return request.app.state.article_repository


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository)
