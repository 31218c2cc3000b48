"""Administrative endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from planshop_backend.api.dependencies import get_billing_service, require_admin
from planshop_backend.api.models import PricingPlanResponse
from planshop_backend.api.services import BillingService
from planshop_backend.database import get_session

router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("/pricing-plans", response_model=list[PricingPlanResponse])
def list_pricing_plans(
    session: Session = Depends(get_session),
    billing_service: BillingService = Depends(get_billing_service),
) -> list[PricingPlanResponse]:
    """Return every pricing plan in the catalog."""

    plans = billing_service.list_pricing_plans(session=session)
    return [PricingPlanResponse.model_validate(plan) for plan in plans]
