"""In-memory TTL cache for per-app detail records."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_TTL_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class CacheStats:
    count: int
    ttl: float
    keys: list[int]

    @property
    def ttl_hours(self) -> float:
        return self.ttl / 3600


class DetailCache:
    """TTL-based in-memory cache backed by a dict.

    Entries keep their creation time; an entry older than ``ttl`` seconds is
    treated as absent and dropped by the lookup that finds it.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store: dict[int, tuple[Any, float]] = {}
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: int) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, created_at = entry
        if self._clock() - created_at > self._ttl:
            del self._store[key]
            return None
        return value

    def set(self, key: int, value: Any) -> None:
        self._store[key] = (value, self._clock())

    def clear(self) -> None:
        self._store.clear()

    def stats(self) -> CacheStats:
        keys = list(self._store)
        return CacheStats(count=len(keys), ttl=self._ttl, keys=keys)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
