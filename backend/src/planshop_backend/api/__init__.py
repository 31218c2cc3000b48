"""API layer: application factory, routers, services and payload models."""

from planshop_backend.api.app import create_api

__all__ = ["create_api"]
