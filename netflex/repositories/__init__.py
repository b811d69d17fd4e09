"""
Persistence adapters.

A key-value store port (memory, JSON file or SQL) holds the raw slots;
ContentRepository and SessionRepository turn those slots into domain models.
Services depend on the repositories and never touch the stores directly.
"""

from .base import KeyValueStore, MemoryStore, StorageError, build_store

__all__ = ["KeyValueStore", "MemoryStore", "StorageError", "build_store"]
