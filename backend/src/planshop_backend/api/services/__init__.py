"""Service layer for API-specific business logic."""

from planshop_backend.api.services.auth import (
    AuthService,
    AuthSession,
    InvalidCredentialsError,
    TokenPayload,
    UserAlreadyExistsError,
)
from planshop_backend.api.services.billing import RECENT_INVOICE_LIMIT, BillingService

__all__ = [
    "RECENT_INVOICE_LIMIT",
    "AuthService",
    "AuthSession",
    "BillingService",
    "InvalidCredentialsError",
    "TokenPayload",
    "UserAlreadyExistsError",
]
