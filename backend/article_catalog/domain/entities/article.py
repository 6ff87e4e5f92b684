"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def split_categories(raw: str | None) -> list[str]:
    """Split a comma-separated category string into trimmed, non-empty labels."""
    if not raw:
        return []
    return [label.strip() for label in raw.split(",") if label.strip()]


@dataclass(frozen=True)
class ArticleInput:
    """Caller-supplied article fields — everything except id and timestamps."""

    article_number: int
    name: str
    article_category: str
    bicycle_category: str
    material: str
    length_in_mm: int
    width_in_mm: int
    height_in_mm: int
    net_weight_in_gramm: int


@dataclass
class Article:
    """Core domain entity representing one catalog part."""

    article_number: int
    name: str
    article_category: str
    bicycle_category: str
    material: str
    length_in_mm: int
    width_in_mm: int
    height_in_mm: int
    net_weight_in_gramm: int
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_input(cls, data: ArticleInput, *, article_id: int, now: datetime) -> "Article":
        return cls(
            id=article_id,
            article_number=data.article_number,
            name=data.name,
            article_category=data.article_category,
            bicycle_category=data.bicycle_category,
            material=data.material,
            length_in_mm=data.length_in_mm,
            width_in_mm=data.width_in_mm,
            height_in_mm=data.height_in_mm,
            net_weight_in_gramm=data.net_weight_in_gramm,
            created_at=now,
            updated_at=now,
        )

    @property
    def bicycle_categories(self) -> list[str]:
        """The individual bicycle-category labels this article belongs to."""
        return split_categories(self.bicycle_category)

    def replace_with(self, data: ArticleInput, now: datetime) -> "Article":
        """Return a new Article carrying *data*, keeping id and created_at.

        updated_at never moves before created_at, even if the clock does.
        """
        return Article(
            id=self.id,
            article_number=data.article_number,
            name=data.name,
            article_category=data.article_category,
            bicycle_category=data.bicycle_category,
            material=data.material,
            length_in_mm=data.length_in_mm,
            width_in_mm=data.width_in_mm,
            height_in_mm=data.height_in_mm,
            net_weight_in_gramm=data.net_weight_in_gramm,
            created_at=self.created_at,
            updated_at=max(now, self.created_at),
        )


@dataclass(frozen=True)
class ArticleFilter:
    """Optional, ANDed filters for an article query.

    ``bicycle_category`` may list several labels separated by commas; an
    article matches when any of its own labels equals any requested one.
    """

    article_category: str | None = None
    bicycle_category: str | None = None
    material: str | None = None


@dataclass(frozen=True)
class SortSpec:
    """Requested ordering — field name is matched case-insensitively."""

    field: str
    descending: bool = False
