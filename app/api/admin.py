"""Admin API — cache inspection and invalidation."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from app.domain.aggregator import DetailAggregator
from app.infra.deps import get_aggregator
from app.models.result import CacheClearResult, CacheStatsResult

logger = logging.getLogger("steam-library.admin")

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/cache/stats", response_model=CacheStatsResult)
async def cache_stats(
    aggregator: Annotated[DetailAggregator, Depends(get_aggregator)],
) -> CacheStatsResult:
    stats = aggregator.cache_stats()
    return CacheStatsResult(count=stats.count, ttl_hours=stats.ttl_hours, keys=stats.keys)


@router.delete("/cache", response_model=CacheClearResult)
async def clear_cache(
    aggregator: Annotated[DetailAggregator, Depends(get_aggregator)],
) -> CacheClearResult:
    cleared = aggregator.clear_cache()
    logger.info("Cleared %d cached detail records", cleared)
    return CacheClearResult(cleared=cleared)
