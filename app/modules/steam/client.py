"""Steam Web API / store client — owned games, player summaries, app details."""

from __future__ import annotations

from typing import Any

import httpx

from app.infra.config import settings


class SteamAPIError(Exception):
    """An upstream Steam call failed at the transport or HTTP status level."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SteamClient:
    """Thin async wrapper over the Steam endpoints this service proxies.

    The ``httpx.AsyncClient`` is owned by the caller (the app lifespan in
    production, a ``MockTransport``-backed client in tests).
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        steam_id: str,
        web_api_url: str = "https://api.steampowered.com",
        store_api_url: str = "https://store.steampowered.com/api",
        language: str = "portuguese",
    ) -> None:
        self.http = http
        self.api_key = api_key
        self.steam_id = steam_id
        self.web_api_url = web_api_url.rstrip("/")
        self.store_api_url = store_api_url.rstrip("/")
        self.language = language

    async def _get_json(self, url: str, params: dict[str, Any], error_message: str) -> Any:
        try:
            resp = await self.http.get(url, params=params)
        except httpx.HTTPError as exc:
            raise SteamAPIError(f"{error_message} - {exc}") from exc
        if not resp.is_success:
            raise SteamAPIError(
                f"{error_message} - Status: {resp.status_code}", status_code=resp.status_code
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise SteamAPIError(f"{error_message} - invalid JSON body") from exc

    async def get_player_summaries(self) -> dict:
        return await self._get_json(
            f"{self.web_api_url}/ISteamUser/GetPlayerSummaries/v2/",
            {
                "key": self.api_key,
                "steamids": self.steam_id,
                "format": "json",
                "l": self.language,
            },
            "Failed to fetch user data",
        )

    async def _get_player_games(self, method: str, error_message: str) -> list[int]:
        data = await self._get_json(
            f"{self.web_api_url}/IPlayerService/{method}/v0001/",
            {"key": self.api_key, "steamid": self.steam_id, "format": "json"},
            error_message,
        )
        if data is None:
            return []
        response = data.get("response") if isinstance(data, dict) else None
        if response is None and isinstance(data, dict):
            return []
        if not isinstance(response, dict):
            raise SteamAPIError(f"{error_message} - malformed response")
        games = response.get("games") or []
        if not isinstance(games, list) or not all(isinstance(game, dict) for game in games):
            raise SteamAPIError(f"{error_message} - malformed response")
        return [game["appid"] for game in games if "appid" in game]

    async def get_owned_game_ids(self) -> list[int]:
        """App ids of every game the configured player owns (may be empty)."""
        return await self._get_player_games("GetOwnedGames", "Failed to fetch owned games")

    async def get_recently_played_game_ids(self) -> list[int]:
        return await self._get_player_games(
            "GetRecentlyPlayedGames", "Failed to fetch recently played games"
        )

    async def get_app_details(self, appid: int) -> dict | None:
        """Return the store's ``{success, data}`` record for one app, or None.

        Raises SteamAPIError when the request itself fails.
        """
        payload = await self._get_json(
            f"{self.store_api_url}/appdetails",
            {"appids": appid, "l": self.language},
            f"Failed to fetch details for appid {appid}",
        )
        if not isinstance(payload, dict):
            return None
        return payload.get(str(appid))


def build_steam_client(http: httpx.AsyncClient) -> SteamClient:
    """Factory: a SteamClient wired from application settings."""
    return SteamClient(
        http=http,
        api_key=settings.steam_api_key,
        steam_id=settings.steam_id,
        web_api_url=settings.steam_web_api_url,
        store_api_url=settings.steam_store_api_url,
        language=settings.steam_language,
    )
