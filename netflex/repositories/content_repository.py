"""Whole-collection access to the catalog slot."""

from __future__ import annotations

import json
import logging
from typing import Iterable

from pydantic import ValidationError

from netflex.domain.models import ContentItem

from .base import MOVIES_KEY, KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class CorruptCollectionError(StorageError):
    """The stored catalog is not a JSON array of valid entries."""


class ContentRepository:
    """Loads and stores the entire catalog; there is no partial update."""

    def __init__(self, store: KeyValueStore, key: str = MOVIES_KEY) -> None:
        self.store = store
        self.key = key

    def exists(self) -> bool:
        return bool(self.store.get(self.key))

    def load_all(self) -> list[ContentItem]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            rows = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise CorruptCollectionError(f"Catalog slot {self.key!r} is not valid JSON") from exc
        if not isinstance(rows, list):
            raise CorruptCollectionError(f"Catalog slot {self.key!r} does not hold a list")
        try:
            return [ContentItem.model_validate(row) for row in rows]
        except ValidationError as exc:
            raise CorruptCollectionError(f"Catalog slot {self.key!r} holds an invalid entry: {exc}") from exc

    def save_all(self, items: Iterable[ContentItem]) -> None:
        payload = [item.to_dict() for item in items]
        self.store.set(self.key, json.dumps(payload, ensure_ascii=False))

    def seed_if_missing(self, items: Iterable[ContentItem]) -> bool:
        """Write ``items`` only when the slot is absent or empty. Returns True if seeded."""
        if self.exists():
            return False
        rows = list(items)
        self.save_all(rows)
        logger.info("Seeded catalog slot %r with %d entries", self.key, len(rows))
        return True

    def clear(self) -> None:
        self.store.remove(self.key)
