"""Response schemas for the library and admin endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LibraryResult(BaseModel):
    """Aggregated game details for one library listing."""

    model_config = ConfigDict(populate_by_name=True)

    total_games: int = Field(alias="totalGames")
    resolved_games: int = Field(alias="resolvedGames")
    games: dict[str, dict] = {}


class CacheStatsResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    count: int
    ttl_hours: float = Field(alias="ttlHours")
    keys: list[int] = []


class CacheClearResult(BaseModel):
    cleared: int
