"""FastAPI application factory for republishing the last snapshot."""

from __future__ import annotations

from fastapi import FastAPI

from zeus_core import __version__
from zeus_core.config import ZeusConfig


def create_app(config: ZeusConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or ZeusConfig.load()

    app = FastAPI(
        title="zeus-core",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )
    app.state.config = config

    from zeus_core.web.api.output import router as output_router

    app.include_router(output_router)

    return app
