"""In-memory views over a loaded catalog (rows, search, dashboard counters)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .models import ContentItem, ContentType, Country, Genre

NEW_RELEASES_LIMIT = 10
HISTORY_LIMIT = 5


def by_content_type(items: Iterable[ContentItem], content_type: ContentType) -> list[ContentItem]:
    return [m for m in items if m.content_type == content_type]


def by_country(items: Iterable[ContentItem], country: Country) -> list[ContentItem]:
    return [m for m in items if m.country == country]


def by_genre(items: Iterable[ContentItem], genre: Genre) -> list[ContentItem]:
    return [m for m in items if m.genre == genre]


def popular(items: Iterable[ContentItem]) -> list[ContentItem]:
    return [m for m in items if m.is_popular]


def new_releases(items: Iterable[ContentItem], limit: int = NEW_RELEASES_LIMIT) -> list[ContentItem]:
    """Most recent release years first; ties keep storage order."""
    return sorted(items, key=lambda m: m.year or 0, reverse=True)[:limit]


def search(items: Iterable[ContentItem], query: str | None) -> list[ContentItem]:
    """Viewer search: title or genre contains the query (case-insensitive)."""
    needle = (query or "").lower()
    if not needle:
        return []
    return [m for m in items if needle in m.title.lower() or needle in m.genre.value.lower()]


def admin_search(items: Iterable[ContentItem], query: str | None) -> list[ContentItem]:
    """Admin list filter over title, country, genre and content type; blank query keeps everything."""
    needle = (query or "").lower()
    rows = list(items)
    if not needle:
        return rows
    return [
        m
        for m in rows
        if needle in m.title.lower()
        or needle in m.country.value.lower()
        or needle in m.genre.value.lower()
        or needle in m.content_type.value.lower()
    ]


def dashboard_stats(items: Iterable[ContentItem]) -> dict[str, int]:
    rows = list(items)
    series = len(by_content_type(rows, ContentType.SERIES))
    return {
        "total": len(rows),
        "series": series,
        "singles": len(rows) - series,
        "popular": len(popular(rows)),
    }


@dataclass
class WatchHistory:
    """Recently played entries, newest first, without duplicates."""

    limit: int = HISTORY_LIMIT
    items: list[ContentItem] = field(default_factory=list)

    def record(self, item: ContentItem) -> None:
        rest = [m for m in self.items if m.id != item.id]
        self.items = [item, *rest][: self.limit]

    def clear(self) -> None:
        self.items = []
