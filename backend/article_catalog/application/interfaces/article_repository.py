"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_catalog.domain.entities import Article, ArticleFilter, ArticleInput, SortSpec


class ArticleRepository(ABC):
    """Port for the article catalog store — implemented in the infrastructure layer.

    Implementations own the article records and enforce the uniqueness of
    ``article_number``; everything they hand out is a copy.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, or None when absent."""
        ...

    @abstractmethod
    async def query(
        self,
        filters: ArticleFilter | None = None,
        sort: SortSpec | None = None,
    ) -> list[Article]:
        """Return a snapshot of the articles matching *filters*, ordered by *sort*."""
        ...

    @abstractmethod
    async def create(self, data: ArticleInput) -> Article:
        """Store a new article and return it with the generated ID.

        Raises DuplicateArticleNumberError if the number is taken.
        """
        ...

    @abstractmethod
    async def update(self, article_id: int, data: ArticleInput) -> Article | None:
        """Replace every mutable field of an article.

        Returns None when the ID is unknown. Raises DuplicateArticleNumberError
        when the new number belongs to another article.
        """
        ...

    @abstractmethod
    async def exists_by_article_number(
        self, article_number: int, excluding_id: int | None = None
    ) -> bool:
        """Check whether another article already uses *article_number*."""
        ...
