"""Planshop API entrypoint."""

from __future__ import annotations

import uvicorn

from planshop_backend.settings import get_settings


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration."""
    config = get_settings()
    uvicorn.run(
        "planshop_backend.api:create_api",
        factory=True,
        host=config.api_host,
        port=config.api_port,
        reload=reload,
        log_config=None,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
