from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from cmon_sd import __version__
from cmon_sd.api.routes import targets
from cmon_sd.clients import CmonClient
from cmon_sd.config import get_settings
from cmon_sd.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    configure_logging(settings.log_level)
    client = CmonClient(
        settings.cmon_endpoint,
        settings.cmon_username,
        settings.cmon_password,
        timeout=settings.cmon_timeout,
        verify=settings.cmon_verify_tls,
    )
    app.state.cmon_client = client
    try:
        yield
    finally:
        await client.aclose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="cmon Prometheus service discovery",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.include_router(targets.router, tags=["targets"])
    return app


app = create_app()
