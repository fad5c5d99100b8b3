"""FastAPI dependencies for the lifespan-owned Steam client and aggregator."""

from __future__ import annotations

from fastapi import Request

from app.domain.aggregator import DetailAggregator
from app.modules.steam.client import SteamClient


def get_steam_client(request: Request) -> SteamClient:
    return request.app.state.steam_client


def get_aggregator(request: Request) -> DetailAggregator:
    return request.app.state.aggregator
