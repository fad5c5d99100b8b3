"""Application configuration via Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Steam
    steam_api_key: str = ""
    steam_id: str = ""
    steam_web_api_url: str = "https://api.steampowered.com"
    steam_store_api_url: str = "https://store.steampowered.com/api"
    steam_language: str = "portuguese"
    steam_request_timeout: float = 10.0

    # Cache
    cache_ttl_hours: float = 24

    # CORS
    cors_origins: list[str] = ["*"]

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 3333
    app_debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_hours * 3600


settings = Settings()
