"""Key-value store port shared by every persistence adapter."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from netflex.core.config import Settings, get_settings

MOVIES_KEY = "netflex_movies"
USER_KEY = "netflex_user"


class StorageError(Exception):
    """The underlying store could not be read or written."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Named text slots. Values are opaque strings (JSON documents in practice)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store, used by tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove(self, key: str) -> None:
        self._slots.pop(key, None)


def build_store(settings: Settings | None = None) -> KeyValueStore:
    """Pick the adapter named by STORAGE_BACKEND."""
    settings = settings or get_settings()
    backend = settings.storage_backend
    if backend == "memory":
        return MemoryStore()
    if backend == "json":
        from .json_storage import JsonFileStore

        return JsonFileStore(settings.data_file)
    if backend == "sql":
        from .sql_storage import SQLStore

        return SQLStore(settings.database_url)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")
