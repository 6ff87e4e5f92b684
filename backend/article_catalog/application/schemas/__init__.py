from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleNumberExistsResponse,
)
from .errors import ErrorResponse, ValidationErrorResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleNumberExistsResponse",
    "ErrorResponse",
    "ValidationErrorResponse",
]
