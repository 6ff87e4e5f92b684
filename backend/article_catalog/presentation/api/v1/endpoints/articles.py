"""Article catalog endpoints — list/filter/sort, read, create and replace."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from article_catalog.application.schemas import (
    ArticleCreate,
    ArticleNumberExistsResponse,
    ArticleResponse,
    ArticleUpdate,
)
from article_catalog.application.services import ArticleService
from article_catalog.domain.entities import ArticleFilter, SortSpec
from article_catalog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from article_catalog.infrastructure.dependencies import get_article_service
from article_catalog.infrastructure.memory import SORTABLE_FIELDS

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    article_category: str | None = Query(None, alias="articleCategory"),
    bicycle_category: str | None = Query(
        None,
        alias="bicycleCategory",
        description="One or more comma-separated bicycle categories; any match counts.",
    ),
    material: str | None = Query(None),
    sort_by: str | None = Query(
        None,
        alias="sortBy",
        description=f"One of {', '.join(SORTABLE_FIELDS)}. Unknown fields sort by articleNumber.",
    ),
    sort_descending: bool = Query(False, alias="sortDescending"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve all articles matching the filters, in the requested order."""
    filters = ArticleFilter(
        article_category=article_category,
        bicycle_category=bicycle_category,
        material=material,
    )
    sort = SortSpec(field=sort_by, descending=sort_descending) if sort_by else None
    articles = await service.list_articles(filters, sort)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/exists", response_model=ArticleNumberExistsResponse)
async def article_number_exists(
    article_number: int = Query(..., alias="articleNumber"),
    exclude_id: int | None = Query(None, alias="excludeId"),
    service: ArticleService = Depends(get_article_service),
) -> ArticleNumberExistsResponse:
    """Check whether an article number is already taken (optionally ignoring one article)."""
    exists = await service.article_number_exists(article_number, exclude_id)
    return ArticleNumberExistsResponse(article_number=article_number, exists=exists)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    request: Request,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    try:
        article = await service.create_article(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    response.headers["Location"] = str(request.app.url_path_for("get_article", article_id=article.id))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace every field of an existing article."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)
