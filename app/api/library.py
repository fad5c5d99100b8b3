"""Library API — player summary and aggregated game listings."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from app.domain.aggregator import DetailAggregator
from app.infra.deps import get_aggregator, get_steam_client
from app.models.result import LibraryResult
from app.modules.steam.client import SteamAPIError, SteamClient

logger = logging.getLogger("steam-library.api")

router = APIRouter(tags=["library"])


async def _aggregate(
    aggregator: DetailAggregator,
    game_ids: Awaitable[list[int]],
    label: str,
) -> LibraryResult:
    """Resolve a player's game list into details and map the outcome to a status."""
    try:
        ids = await game_ids
    except SteamAPIError as exc:
        logger.error("Failed to list %s: %s", label, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    if not ids:
        raise HTTPException(status_code=404, detail=f"No {label} found for this user")

    logger.info("Fetching details for %d %s...", len(ids), label)
    details = await aggregator.fetch_details(ids)

    if not details:
        raise HTTPException(
            status_code=503,
            detail=f"Could not fetch details for any of the {len(ids)} {label}",
        )
    logger.info("Resolved details for %d of %d %s", len(details), len(ids), label)
    return LibraryResult(
        total_games=len(ids),
        resolved_games=len(details),
        games={str(appid): record for appid, record in details.items()},
    )


@router.get("/user")
async def get_user(client: Annotated[SteamClient, Depends(get_steam_client)]) -> dict:
    try:
        return await client.get_player_summaries()
    except SteamAPIError as exc:
        logger.error("Error in /user endpoint: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc


@router.get("/games", response_model=LibraryResult)
async def get_games(
    client: Annotated[SteamClient, Depends(get_steam_client)],
    aggregator: Annotated[DetailAggregator, Depends(get_aggregator)],
) -> LibraryResult:
    return await _aggregate(aggregator, client.get_owned_game_ids(), "games")


@router.get("/recentlyPlayedGames", response_model=LibraryResult)
async def get_recently_played_games(
    client: Annotated[SteamClient, Depends(get_steam_client)],
    aggregator: Annotated[DetailAggregator, Depends(get_aggregator)],
) -> LibraryResult:
    return await _aggregate(
        aggregator, client.get_recently_played_game_ids(), "recently played games"
    )
