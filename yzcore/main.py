"""yz-core — FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from importlib.metadata import version, PackageNotFoundError

from fastapi import FastAPI

from yzcore.api import rolls
from yzcore.infra.cache import RollCache
from yzcore.infra.config import settings

logger = logging.getLogger("yz-core")

try:
    __version__ = version("yz-core")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore[no-untyped-def]
    logger.setLevel(settings.log_level.upper())
    app.state.roll_cache = RollCache(
        default_ttl=settings.roll_cache_ttl,
        max_size=settings.roll_cache_max_size,
    )
    logger.info("Roll cache created (ttl=%ds)", settings.roll_cache_ttl)
    yield
    app.state.roll_cache.clear()


app = FastAPI(
    title="yz-core",
    description="Year Zero Engine dice roller — pools, pushes and difficulty modifiers",
    version=__version__,
    lifespan=lifespan,
    debug=settings.app_debug,
)

app.include_router(rolls.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "engine": "yz-core", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("yzcore.main:app", host=settings.app_host, port=settings.app_port)
