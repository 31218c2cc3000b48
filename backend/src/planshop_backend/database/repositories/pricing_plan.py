"""Repository helpers for the pricing plan catalog."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from planshop_backend.database.schemas import PricingPlanSchema


class PricingPlanRepository:
    """Read access to :class:`PricingPlanSchema` rows."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[PricingPlanSchema]:
        """Return every stored plan, unfiltered, in storage order."""
        return list(self._session.scalars(select(PricingPlanSchema)))
