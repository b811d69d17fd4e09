"""
JSON file persistence adapter.

All slots live in one JSON document; every write rewrites the whole file.
Not safe for concurrent writers.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging

from .base import StorageError

logger = logging.getLogger(__name__)


class JsonFileStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        return data

    def save(self, db: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc

    def get(self, key: str) -> str | None:
        value = self.load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        db = self.load()
        db[key] = value
        self.save(db)

    def remove(self, key: str) -> None:
        db = self.load()
        if db.pop(key, None) is not None:
            self.save(db)
            logger.debug("Removed slot %r from %s", key, self.path)
