"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planshop_backend.api.routers import admin_router, auth_router, orders_router
from planshop_backend.logging_config import configure_logging
from planshop_backend.settings import BackendSettings, get_settings

API_PREFIX = "/api"


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    configure_logging(config.log_level)

    app = FastAPI(title="Planshop API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(admin_router, prefix=API_PREFIX)
    app.include_router(orders_router, prefix=API_PREFIX)
    return app
