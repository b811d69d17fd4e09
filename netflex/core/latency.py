"""
Simulated network latency.

Every service call awaits a fixed delay before touching storage so that
callers written against a remote API see the same asynchronous timing.
The delay table is injected, and scale 0 turns it off for tests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Mapping

from .config import get_settings

DEFAULT_DELAYS_MS: Mapping[str, int] = {
    "list": 500,
    "get": 300,
    "create": 800,
    "update": 800,
    "delete": 600,
    "login": 800,
}


@dataclass
class Latency:
    """Per-operation delays in milliseconds, multiplied by ``scale``."""

    scale: float = 1.0
    delays_ms: Mapping[str, int] = field(default_factory=lambda: dict(DEFAULT_DELAYS_MS))

    @classmethod
    def from_settings(cls) -> "Latency":
        return cls(scale=get_settings().latency_scale)

    @classmethod
    def disabled(cls) -> "Latency":
        return cls(scale=0.0)

    def seconds_for(self, operation: str) -> float:
        return max(0.0, self.delays_ms.get(operation, 0) * self.scale / 1000.0)

    async def wait(self, operation: str) -> None:
        delay = self.seconds_for(operation)
        if delay > 0:
            await asyncio.sleep(delay)
