"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Field names are snake_case in Python and camelCase on the wire; requests
accept either spelling.
"""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "str_strip_whitespace": True,
}


class _ArticleFields(BaseModel):
    """Writable article fields, shared by create and update."""

    article_number: int = Field(..., gt=0, examples=[100298])
    name: str = Field(..., min_length=2, max_length=200, examples=["Gravel cranks pro"])
    article_category: str = Field(..., min_length=1, max_length=100, examples=["Crank arm"])
    bicycle_category: str = Field(
        ..., min_length=1, max_length=100, examples=["Gravel, e-Gravel"],
    )
    material: str = Field(..., min_length=1, max_length=50, examples=["Carbon"])
    length_in_mm: int = Field(..., gt=0, le=10_000, examples=[175])
    width_in_mm: int = Field(..., gt=0, le=10_000, examples=[12])
    height_in_mm: int = Field(..., gt=0, le=10_000, examples=[25])
    net_weight_in_gramm: int = Field(..., gt=0, le=100_000, examples=[140])

    model_config = _CAMEL_CONFIG


class ArticleCreate(_ArticleFields):
    """Schema for creating a new article."""


class ArticleUpdate(_ArticleFields):
    """Schema for replacing an existing article — every field is required."""


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    article_number: int
    name: str
    article_category: str
    bicycle_category: str
    material: str
    length_in_mm: int
    width_in_mm: int
    height_in_mm: int
    net_weight_in_gramm: int
    created_at: datetime
    updated_at: datetime

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}


class ArticleNumberExistsResponse(BaseModel):
    """Result of an article-number availability check."""

    article_number: int
    exists: bool

    model_config = _CAMEL_CONFIG
