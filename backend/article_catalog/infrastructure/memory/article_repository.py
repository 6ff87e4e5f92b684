"""In-memory article catalog store.

Holds every article record for the lifetime of the process. One instance is
built by the application factory and shared by all requests; tests build
their own. Records are never handed out directly; callers always receive
copies, so the store is the only owner of its data.

All check-then-write sequences run under a single ``threading.Lock``. The
methods are ``async`` to satisfy the repository port but never await while
holding the lock, which keeps them atomic across asyncio tasks and threads.
"""

import threading
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime, timezone
from operator import attrgetter
from typing import Any

from article_catalog.application.interfaces import ArticleRepository
from article_catalog.domain.entities import (
    Article,
    ArticleFilter,
    ArticleInput,
    SortSpec,
    split_categories,
)
from article_catalog.domain.exceptions import DuplicateArticleNumberError


# ── Sort-field dispatch ──────────────────────────────────────────────
#
# Keys are normalized field names (lowercase, no underscores) so that
# "netWeightInGramm", "netweightingramm" and "net_weight_in_gramm" all
# resolve to the same key function.

_SORT_KEYS: dict[str, Callable[[Article], Any]] = {
    "articlenumber": attrgetter("article_number"),
    "name": attrgetter("name"),
    "articlecategory": attrgetter("article_category"),
    "bicyclecategory": attrgetter("bicycle_category"),
    "material": attrgetter("material"),
    "netweightingramm": attrgetter("net_weight_in_gramm"),
    "lengthinmm": attrgetter("length_in_mm"),
    "widthinmm": attrgetter("width_in_mm"),
    "heightinmm": attrgetter("height_in_mm"),
}
_DEFAULT_SORT_KEY = _SORT_KEYS["articlenumber"]

SORTABLE_FIELDS: tuple[str, ...] = (
    "articleNumber",
    "name",
    "articleCategory",
    "bicycleCategory",
    "material",
    "netWeightInGramm",
    "lengthInMm",
    "widthInMm",
    "heightInMm",
)


def _normalize_field(name: str) -> str:
    return name.replace("_", "").strip().lower()


def resolve_sort(sort: SortSpec | None) -> tuple[Callable[[Article], Any], bool]:
    """Look up the key function and direction for *sort*.

    A missing or unrecognized field falls back to ascending article number;
    the requested direction only applies to a recognized field.
    """
    if sort is None or not sort.field:
        return _DEFAULT_SORT_KEY, False
    key = _SORT_KEYS.get(_normalize_field(sort.field))
    if key is None:
        return _DEFAULT_SORT_KEY, False
    return key, sort.descending


def _normalize_label(value: str | None) -> str | None:
    """Lowercase a filter value; blank values mean "no filter"."""
    if value is None or not value.strip():
        return None
    return value.strip().lower()


def matches_filter(article: Article, filters: ArticleFilter) -> bool:
    """Return True when *article* satisfies every filter that is set."""
    article_category = _normalize_label(filters.article_category)
    if article_category is not None and article.article_category.lower() != article_category:
        return False

    material = _normalize_label(filters.material)
    if material is not None and article.material.lower() != material:
        return False

    wanted = {label.lower() for label in split_categories(filters.bicycle_category)}
    if wanted:
        own = {label.lower() for label in article.bicycle_categories}
        if own.isdisjoint(wanted):
            return False

    return True


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port with a lock-guarded dict."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._lock = threading.Lock()
        # Insertion order equals increasing id, which is the base query order.
        self._articles: dict[int, Article] = {}
        self._ids_by_number: dict[int, int] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._articles)

    # ── Reads ────────────────────────────────────────────────────────

    async def get_by_id(self, article_id: int) -> Article | None:
        with self._lock:
            article = self._articles.get(article_id)
            return replace(article) if article is not None else None

    async def query(
        self,
        filters: ArticleFilter | None = None,
        sort: SortSpec | None = None,
    ) -> list[Article]:
        with self._lock:
            snapshot = [replace(article) for article in self._articles.values()]

        if filters is not None:
            snapshot = [a for a in snapshot if matches_filter(a, filters)]

        key, descending = resolve_sort(sort)
        # sorted() is stable, also with reverse=True, so ties keep id order.
        return sorted(snapshot, key=key, reverse=descending)

    async def exists_by_article_number(
        self, article_number: int, excluding_id: int | None = None
    ) -> bool:
        with self._lock:
            return self._number_taken(article_number, excluding_id)

    # ── Writes ───────────────────────────────────────────────────────

    async def create(self, data: ArticleInput) -> Article:
        with self._lock:
            return self._insert(data)

    async def update(self, article_id: int, data: ArticleInput) -> Article | None:
        with self._lock:
            existing = self._articles.get(article_id)
            if existing is None:
                return None

            number_changed = data.article_number != existing.article_number
            if number_changed and self._number_taken(data.article_number, article_id):
                raise DuplicateArticleNumberError(data.article_number)

            updated = existing.replace_with(data, self._clock())
            self._articles[article_id] = updated
            if number_changed:
                del self._ids_by_number[existing.article_number]
                self._ids_by_number[updated.article_number] = article_id
            return replace(updated)

    def seed(self, articles: Iterable[ArticleInput]) -> list[Article]:
        """Create each of *articles* in order, returning the stored copies.

        Synchronous so the application factory can call it before any
        event loop exists. The batch is all-or-nothing: a duplicate number,
        against the store or within the batch, leaves the store untouched.
        """
        batch = list(articles)
        with self._lock:
            seen: set[int] = set()
            for data in batch:
                if data.article_number in seen or self._number_taken(data.article_number, None):
                    raise DuplicateArticleNumberError(data.article_number)
                seen.add(data.article_number)
            return [self._insert(data) for data in batch]

    # ── Internals (caller must hold the lock) ────────────────────────

    def _insert(self, data: ArticleInput) -> Article:
        if self._number_taken(data.article_number, None):
            raise DuplicateArticleNumberError(data.article_number)

        article = Article.from_input(data, article_id=self._next_id, now=self._clock())
        self._next_id += 1
        self._articles[article.id] = article
        self._ids_by_number[article.article_number] = article.id
        return replace(article)

    def _number_taken(self, article_number: int, excluding_id: int | None) -> bool:
        owner = self._ids_by_number.get(article_number)
        return owner is not None and owner != excluding_id
