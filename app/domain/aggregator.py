"""Detail aggregator — cache-aware concurrent fan-out of per-app lookups."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Protocol

from app.infra.cache import CacheStats, DetailCache

logger = logging.getLogger("steam-library.aggregator")


class DetailSource(Protocol):
    async def get_app_details(self, appid: int) -> dict | None: ...


class DetailAggregator:
    """Resolves app ids to detail records, serving what it can from cache.

    Each uncached id is fetched exactly once per call, concurrently. A failed
    or unsuccessful lookup leaves the id out of the result and out of the
    cache; it never fails the whole batch.
    """

    def __init__(self, source: DetailSource, cache: DetailCache | None = None) -> None:
        self.source = source
        self.cache = cache if cache is not None else DetailCache()

    async def fetch_details(self, ids: Iterable[int]) -> dict[int, dict]:
        results: dict[int, dict] = {}
        uncached: list[int] = []
        for appid in dict.fromkeys(ids):
            record = self.cache.get(appid)
            if record is None:
                uncached.append(appid)
            else:
                results[appid] = record

        if not uncached:
            return results

        logger.debug("%d cached, fetching %d from upstream", len(results), len(uncached))
        async with asyncio.TaskGroup() as tg:
            for appid in uncached:
                tg.create_task(self._fetch_one(appid, results))
        return results

    async def _fetch_one(self, appid: int, results: dict[int, dict]) -> None:
        try:
            record = await self.source.get_app_details(appid)
        except Exception as exc:
            logger.warning("Error fetching details for appid %s: %s", appid, exc)
            return
        if not isinstance(record, dict) or not record.get("success"):
            logger.warning("No valid data returned for appid %s", appid)
            return
        self.cache.set(appid, record)
        results[appid] = record

    def clear_cache(self) -> int:
        """Drop every cached record; returns the raw entry count, expired entries included."""
        count = len(self.cache)
        self.cache.clear()
        return count

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()
