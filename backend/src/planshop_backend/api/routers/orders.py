"""Order history endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from planshop_backend.api.dependencies import get_billing_service, require_user
from planshop_backend.api.models import OrderResponse
from planshop_backend.api.services import BillingService
from planshop_backend.database import UserSchema, get_session

router = APIRouter(prefix="/order", tags=["orders"])


@router.get("", response_model=list[OrderResponse])
def list_orders(
    user: UserSchema = Depends(require_user),
    session: Session = Depends(get_session),
    billing_service: BillingService = Depends(get_billing_service),
) -> list[OrderResponse]:
    """Return the caller's orders, newest first, with items and recent invoices."""

    orders = billing_service.list_orders(session=session, user_id=user.id)
    return [OrderResponse.model_validate(order) for order in orders]
