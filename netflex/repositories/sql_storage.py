"""Key-value slots backed by SQLAlchemy (one row per slot)."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from netflex.db.models import StorageSlot
from netflex.db.session import create_schema, get_session

from .base import StorageError


class SQLStore:
    """Slot helpers wrapping the SQLAlchemy session."""

    def __init__(self, url: str | None = None) -> None:
        self.url = url
        try:
            create_schema(url)
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not prepare storage schema: {exc}") from exc

    def get(self, key: str) -> str | None:
        try:
            with get_session(self.url) as session:
                slot = session.get(StorageSlot, key)
                return slot.value if slot else None
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not read slot {key!r}: {exc}") from exc

    def set(self, key: str, value: str) -> None:
        now = datetime.now(timezone.utc)
        try:
            with get_session(self.url) as session:
                slot = session.get(StorageSlot, key)
                if not slot:
                    session.add(StorageSlot(key=key, value=value, updated_at=now))
                else:
                    slot.value = value
                    slot.updated_at = now
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not write slot {key!r}: {exc}") from exc

    def remove(self, key: str) -> None:
        try:
            with get_session(self.url) as session:
                session.execute(delete(StorageSlot).where(StorageSlot.key == key))
        except SQLAlchemyError as exc:
            raise StorageError(f"Could not remove slot {key!r}: {exc}") from exc
