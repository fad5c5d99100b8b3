"""Shared test fixtures."""

from __future__ import annotations

from collections import Counter

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.domain.aggregator import DetailAggregator
from app.infra.cache import DetailCache
from app.infra.deps import get_aggregator, get_steam_client
from app.main import app
from app.modules.steam.client import SteamClient


class FakeSteam:
    """Stand-in for the Steam endpoints, served through httpx.MockTransport.

    ``details`` maps appid -> record dict, or an int HTTP status to fail with.
    Appids missing from ``details`` answer ``{"<id>": {"success": false}}``.
    """

    def __init__(
        self,
        owned: list[int] | None = None,
        recent: list[int] | None = None,
        details: dict[int, dict | int] | None = None,
    ) -> None:
        self.owned = owned or []
        self.recent = recent or []
        self.details = details or {}
        self.owned_status = 200
        self.owned_payload: object = None
        self.detail_calls: Counter[int] = Counter()

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.endswith("/GetOwnedGames/v0001/"):
            if self.owned_payload is not None:
                return httpx.Response(200, json=self.owned_payload)
            return self._games(self.owned, self.owned_status)
        if path.endswith("/GetRecentlyPlayedGames/v0001/"):
            return self._games(self.recent, 200)
        if path.endswith("/GetPlayerSummaries/v2/"):
            return httpx.Response(200, json={"response": {"players": [{"personaname": "gaben"}]}})
        if path.endswith("/appdetails"):
            appid = int(request.url.params["appids"])
            self.detail_calls[appid] += 1
            entry = self.details.get(appid, {"success": False})
            if isinstance(entry, int):
                return httpx.Response(entry)
            return httpx.Response(200, json={str(appid): entry})
        return httpx.Response(404)

    @staticmethod
    def _games(ids: list[int], status: int) -> httpx.Response:
        if status != 200:
            return httpx.Response(status)
        if not ids:
            return httpx.Response(200, json={"response": {}})
        return httpx.Response(
            200, json={"response": {"game_count": len(ids), "games": [{"appid": i} for i in ids]}}
        )


def game(appid: int) -> dict:
    return {"success": True, "data": {"steam_appid": appid, "name": f"Game {appid}"}}


@pytest.fixture
def fake_steam() -> FakeSteam:
    return FakeSteam()


@pytest_asyncio.fixture
async def steam_client(fake_steam):
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_steam.handler)) as http:
        yield SteamClient(http=http, api_key="test-key", steam_id="76561197960287930")


@pytest.fixture
def aggregator(steam_client) -> DetailAggregator:
    return DetailAggregator(steam_client, DetailCache())


@pytest_asyncio.fixture
async def client(steam_client, aggregator):
    app.dependency_overrides[get_steam_client] = lambda: steam_client
    app.dependency_overrides[get_aggregator] = lambda: aggregator
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
