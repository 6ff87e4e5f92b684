"""Application service (use case) for Article operations."""

import logging

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.application.schemas import ArticleCreate, ArticleUpdate
from article_catalog.domain.entities import Article, ArticleFilter, ArticleInput, SortSpec
from article_catalog.domain.exceptions import DuplicateArticleNumberError, EntityNotFoundError

logger = logging.getLogger(__name__)


def _to_input(data: ArticleCreate | ArticleUpdate) -> ArticleInput:
    return ArticleInput(
        article_number=data.article_number,
        name=data.name,
        article_category=data.article_category,
        bicycle_category=data.bicycle_category,
        material=data.material,
        length_in_mm=data.length_in_mm,
        width_in_mm=data.width_in_mm,
        height_in_mm=data.height_in_mm,
        net_weight_in_gramm=data.net_weight_in_gramm,
    )


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def list_articles(
        self,
        filters: ArticleFilter | None = None,
        sort: SortSpec | None = None,
    ) -> list[Article]:
        logger.info("Listing articles (filters=%s, sort=%s)", filters, sort)
        return await self._repository.query(filters, sort)

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            logger.warning("Article %s not found", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def create_article(self, data: ArticleCreate) -> Article:
        logger.info("Creating article with number %s", data.article_number)
        try:
            article = await self._repository.create(_to_input(data))
        except DuplicateArticleNumberError:
            logger.warning("Article number %s already exists", data.article_number)
            raise
        logger.debug("Created article %s", article.id)
        return article

    async def update_article(self, article_id: int, data: ArticleUpdate) -> Article:
        logger.info("Updating article %s", article_id)
        try:
            article = await self._repository.update(article_id, _to_input(data))
        except DuplicateArticleNumberError:
            logger.warning(
                "Cannot renumber article %s: number %s already exists",
                article_id,
                data.article_number,
            )
            raise
        if article is None:
            logger.warning("Article %s not found for update", article_id)
            raise EntityNotFoundError("Article", article_id)
        return article

    async def article_number_exists(
        self, article_number: int, excluding_id: int | None = None
    ) -> bool:
        return await self._repository.exists_by_article_number(article_number, excluding_id)
