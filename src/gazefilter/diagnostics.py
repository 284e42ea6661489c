"""Caller-owned statistics for debugging a tracking loop."""

from __future__ import annotations

import logging
from typing import Any


class DebugStats:
    """Named counters and values that a tracking loop can report.

    Nothing in gazefilter writes to this object; callers own it and decide
    when to render or log it.
    """

    def __init__(self) -> None:
        self._stats: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Record ``value`` under ``key``."""
        self._stats[key] = value

    def inc(self, key: str, by: float = 1, init: float = 0) -> None:
        """Increment ``key`` by ``by``, starting from ``init`` when unset."""
        if not self._stats.get(key):
            self._stats[key] = init
        self._stats[key] += by

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        return self._stats.get(key, default)

    def as_dict(self) -> dict[str, Any]:
        """Return a copy of all recorded stats."""
        return dict(self._stats)

    def render(self) -> str:
        """Format the stats as ``key: value`` lines in insertion order."""
        return "".join(f"{key}: {value}\n" for key, value in self._stats.items())

    def log(self, logger: logging.Logger, level: int = logging.DEBUG) -> None:
        """Emit the rendered stats through ``logger``."""
        if self._stats:
            logger.log(level, "%s", self.render().rstrip("\n"))
