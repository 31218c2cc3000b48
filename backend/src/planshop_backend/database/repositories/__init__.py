"""Repositories wrapping SQLAlchemy sessions."""

from planshop_backend.database.repositories.order import OrderRepository
from planshop_backend.database.repositories.pricing_plan import PricingPlanRepository
from planshop_backend.database.repositories.user import UserRepository

__all__ = ["OrderRepository", "PricingPlanRepository", "UserRepository"]
