"""Route definitions for public HTTP endpoints."""

from planshop_backend.api.routers.admin import router as admin_router
from planshop_backend.api.routers.auth import router as auth_router
from planshop_backend.api.routers.orders import router as orders_router

__all__ = ["admin_router", "auth_router", "orders_router"]
