"""SQLAlchemy schemas registered on :class:`BaseSchema`."""

from planshop_backend.database.schemas.order import (
    InvoiceSchema,
    OrderItemSchema,
    OrderSchema,
)
from planshop_backend.database.schemas.pricing_plan import PricingPlanSchema
from planshop_backend.database.schemas.user import UserSchema

__all__ = [
    "InvoiceSchema",
    "OrderItemSchema",
    "OrderSchema",
    "PricingPlanSchema",
    "UserSchema",
]
