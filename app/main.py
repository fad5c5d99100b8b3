"""steam-library — FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from importlib.metadata import version, PackageNotFoundError

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import admin, library
from app.domain.aggregator import DetailAggregator
from app.infra.cache import DetailCache
from app.infra.config import settings
from app.modules.steam.client import build_steam_client

logger = logging.getLogger("steam-library")

try:
    __version__ = version("steam-library")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore[no-untyped-def]
    if not settings.steam_api_key or not settings.steam_id:
        logger.warning("STEAM_API_KEY or STEAM_ID not set; upstream calls will be rejected.")
    async with httpx.AsyncClient(timeout=settings.steam_request_timeout) as http:
        client = build_steam_client(http)
        app.state.steam_client = client
        app.state.aggregator = DetailAggregator(
            client, DetailCache(ttl=settings.cache_ttl_seconds)
        )
        yield


app = FastAPI(
    title="steam-library",
    description="Steam game library proxy with cached per-game details",
    version=__version__,
    debug=settings.app_debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "DELETE"],
)

app.include_router(library.router)
app.include_router(admin.router)


@app.exception_handler(Exception)
async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "service": "steam-library",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - _started_at,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.app_host, port=settings.app_port)
