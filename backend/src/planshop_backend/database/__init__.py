"""Database connectivity helpers, schemas and repositories."""

from planshop_backend.database.base import BaseSchema
from planshop_backend.database.dependencies import get_database, get_session
from planshop_backend.database.repositories import (
    OrderRepository,
    PricingPlanRepository,
    UserRepository,
)
from planshop_backend.database.schemas import (
    InvoiceSchema,
    OrderItemSchema,
    OrderSchema,
    PricingPlanSchema,
    UserSchema,
)
from planshop_backend.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "InvoiceSchema",
    "OrderItemSchema",
    "OrderRepository",
    "OrderSchema",
    "PricingPlanRepository",
    "PricingPlanSchema",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
]
