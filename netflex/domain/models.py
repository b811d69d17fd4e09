"""Pydantic models for the Netflex catalog.

Stored and returned with the camelCase keys the viewing UI consumes;
Python code works with the snake_case attributes.
"""

from __future__ import annotations

import enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ContentType(str, enum.Enum):
    SINGLE = "Single"
    SERIES = "Series"


class Country(str, enum.Enum):
    INDIA = "India"
    KOREA = "Korea"
    AMERICA = "America"
    CHINA = "China"
    TURKEY = "Turkey"


class Genre(str, enum.Enum):
    ACTION = "Action"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    SCI_FI = "Sci-Fi"
    HORROR = "Horror"
    ROMANCE = "Romance"
    DOCUMENTARY = "Documentary"
    THRILLER = "Thriller"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ContentDraft(_CamelModel):
    """Fields supplied by the caller when creating an entry."""

    title: str
    description: str = ""
    poster_path: str = ""
    video_path: str = ""
    content_type: ContentType
    country: Country
    genre: Genre
    year: int
    is_popular: bool = False


class ContentItem(ContentDraft):
    """Catalog entry as persisted. ``id`` and ``created_at`` are assigned on create."""

    id: str
    created_at: str


class ContentPatch(_CamelModel):
    """Partial update; only explicitly supplied fields are merged."""

    title: Optional[str] = None
    description: Optional[str] = None
    poster_path: Optional[str] = None
    video_path: Optional[str] = None
    content_type: Optional[ContentType] = None
    country: Optional[Country] = None
    genre: Optional[Genre] = None
    year: Optional[int] = None
    is_popular: Optional[bool] = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)

    def apply_to(self, item: ContentItem) -> ContentItem:
        return item.model_copy(update=self.changes())


class Session(BaseModel):
    """Logged-in user marker stored in the session slot."""

    username: str
    token: str


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every asynchronous operation."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ApiResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: ``data``/``message`` keys only when present."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
