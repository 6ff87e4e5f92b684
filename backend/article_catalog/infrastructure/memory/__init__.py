from .article_repository import InMemoryArticleRepository, SORTABLE_FIELDS
from .seed import SAMPLE_ARTICLES

__all__ = [
    "InMemoryArticleRepository",
    "SAMPLE_ARTICLES",
    "SORTABLE_FIELDS",
]
