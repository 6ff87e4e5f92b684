from .article import Article, ArticleFilter, ArticleInput, SortSpec, split_categories

__all__ = [
    "Article",
    "ArticleFilter",
    "ArticleInput",
    "SortSpec",
    "split_categories",
]
