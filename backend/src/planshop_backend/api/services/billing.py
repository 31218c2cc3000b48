"""Read-side billing queries: the plan catalog and a user's order history."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.orm import Session

from planshop_backend.database import (
    OrderRepository,
    OrderSchema,
    PricingPlanRepository,
    PricingPlanSchema,
)

RECENT_INVOICE_LIMIT = 5


class BillingService:
    """Thin facade over the plan and order repositories."""

    def __init__(self, *, recent_invoice_limit: int = RECENT_INVOICE_LIMIT) -> None:
        self._recent_invoice_limit = recent_invoice_limit

    def list_pricing_plans(self, *, session: Session) -> list[PricingPlanSchema]:
        return PricingPlanRepository(session).list_all()

    def list_orders(self, *, session: Session, user_id: UUID) -> list[OrderSchema]:
        """Return the user's orders with items and their latest invoices."""
        return OrderRepository(session).list_for_user(
            user_id, invoice_limit=self._recent_invoice_limit
        )
