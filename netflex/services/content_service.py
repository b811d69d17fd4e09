"""
Catalog CRUD use cases.

Each call waits for its simulated latency, loads the whole collection,
mutates it in memory and stores it back. Store access runs in a worker
thread so file and SQL backends do not block the event loop.
"""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone
import logging
import uuid
from typing import Any, Callable, Mapping

from pydantic import ValidationError

from netflex.core.latency import Latency
from netflex.domain.models import ApiResponse, ContentDraft, ContentItem, ContentPatch
from netflex.domain.seed import seed_items
from netflex.repositories.base import StorageError
from netflex.repositories.content_repository import ContentRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Movie not found"
GENERIC_FAILURE_MESSAGE = "Operation failed. Please try again."


class ContentError(Exception):
    """Base class for catalog-related exceptions."""


class ContentNotFoundError(ContentError):
    pass


def new_content_id() -> str:
    return uuid.uuid4().hex


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ContentService:
    """Async CRUD over the catalog collection."""

    def __init__(
        self,
        repository: ContentRepository,
        latency: Latency | None = None,
        *,
        id_factory: Callable[[], str] = new_content_id,
        clock: Callable[[], str] = utc_timestamp,
    ) -> None:
        self.repository = repository
        self.latency = latency or Latency.from_settings()
        self._id_factory = id_factory
        self._clock = clock

    # -------------------------------------- seeding --------------------------------------
    def initialize(self) -> bool:
        """Seed the example catalog once. Later calls never touch an existing collection."""
        return self.repository.seed_if_missing(seed_items())

    # -------------------------------------- helpers --------------------------------------
    def _find(self, items: list[ContentItem], content_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == content_id:
                return index
        raise ContentNotFoundError(content_id)

    def _unique_id(self, items: list[ContentItem]) -> str:
        taken = {item.id for item in items}
        candidate = self._id_factory()
        while not candidate or candidate in taken:
            candidate = self._id_factory()
        return candidate

    @staticmethod
    def _coerce_draft(fields: ContentDraft | Mapping[str, Any]) -> ContentDraft:
        if isinstance(fields, ContentDraft):
            return ContentDraft.model_validate(fields.model_dump())
        return ContentDraft.model_validate(dict(fields))

    @staticmethod
    def _coerce_patch(fields: ContentPatch | Mapping[str, Any]) -> ContentPatch:
        if isinstance(fields, ContentPatch):
            return fields
        return ContentPatch.model_validate(dict(fields))

    # -------------------------------------- queries --------------------------------------
    async def list_all(self) -> ApiResponse[list[ContentItem]]:
        await self.latency.wait("list")
        try:
            items = await asyncio.to_thread(self.repository.load_all)
        except StorageError:
            logger.exception("Could not read catalog")
            return ApiResponse[list[ContentItem]].fail(GENERIC_FAILURE_MESSAGE)
        return ApiResponse[list[ContentItem]].ok(items)

    async def get_by_id(self, content_id: str) -> ApiResponse[ContentItem]:
        await self.latency.wait("get")
        try:
            items = await asyncio.to_thread(self.repository.load_all)
            item = items[self._find(items, content_id)]
        except ContentNotFoundError:
            return ApiResponse[ContentItem].fail(NOT_FOUND_MESSAGE)
        except StorageError:
            logger.exception("Could not read catalog")
            return ApiResponse[ContentItem].fail(GENERIC_FAILURE_MESSAGE)
        return ApiResponse[ContentItem].ok(item)

    # -------------------------------------- mutations --------------------------------------
    async def create(self, fields: ContentDraft | Mapping[str, Any]) -> ApiResponse[ContentItem]:
        try:
            draft = self._coerce_draft(fields)
        except ValidationError as exc:
            return ApiResponse[ContentItem].fail(f"Invalid content: {exc.error_count()} field error(s)")
        await self.latency.wait("create")
        try:
            items = await asyncio.to_thread(self.repository.load_all)
            item = ContentItem(**draft.model_dump(), id=self._unique_id(items), created_at=self._clock())
            items.insert(0, item)
            await asyncio.to_thread(self.repository.save_all, items)
        except StorageError:
            logger.exception("Could not create catalog entry")
            return ApiResponse[ContentItem].fail(GENERIC_FAILURE_MESSAGE)
        logger.info("Created catalog entry %s (%s)", item.id, item.title)
        return ApiResponse[ContentItem].ok(item)

    async def update(self, content_id: str, fields: ContentPatch | Mapping[str, Any]) -> ApiResponse[ContentItem]:
        try:
            patch = self._coerce_patch(fields)
        except ValidationError as exc:
            return ApiResponse[ContentItem].fail(f"Invalid content: {exc.error_count()} field error(s)")
        await self.latency.wait("update")
        try:
            items = await asyncio.to_thread(self.repository.load_all)
            index = self._find(items, content_id)
            items[index] = patch.apply_to(items[index])
            await asyncio.to_thread(self.repository.save_all, items)
        except ContentNotFoundError:
            return ApiResponse[ContentItem].fail(NOT_FOUND_MESSAGE)
        except StorageError:
            logger.exception("Could not update catalog entry %s", content_id)
            return ApiResponse[ContentItem].fail(GENERIC_FAILURE_MESSAGE)
        return ApiResponse[ContentItem].ok(items[index])

    async def delete(self, content_id: str) -> ApiResponse[None]:
        """Remove every entry with ``content_id``. Deleting an unknown id still succeeds."""
        await self.latency.wait("delete")
        try:
            items = await asyncio.to_thread(self.repository.load_all)
            remaining = [item for item in items if item.id != content_id]
            await asyncio.to_thread(self.repository.save_all, remaining)
        except StorageError:
            logger.exception("Could not delete catalog entry %s", content_id)
            return ApiResponse[None].fail(GENERIC_FAILURE_MESSAGE)
        if len(remaining) != len(items):
            logger.info("Deleted catalog entry %s", content_id)
        return ApiResponse[None].ok()
