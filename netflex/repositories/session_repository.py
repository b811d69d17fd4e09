"""Single-slot storage for the logged-in user."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from netflex.domain.models import Session

from .base import USER_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class SessionRepository:
    def __init__(self, store: KeyValueStore, key: str = USER_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> Session | None:
        raw = self.store.get(self.key)
        if not raw:
            return None
        try:
            return Session.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError):
            logger.warning("Discarding unreadable session slot %r", self.key)
            return None

    def save(self, session: Session) -> None:
        self.store.set(self.key, session.model_dump_json())

    def clear(self) -> None:
        self.store.remove(self.key)
