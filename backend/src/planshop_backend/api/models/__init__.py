"""Models used for API request and response payloads."""

from planshop_backend.api.models.auth import (
    AuthTokenResponse,
    SessionResponse,
    SessionUserResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserResponse,
)
from planshop_backend.api.models.billing import (
    InvoiceResponse,
    OrderItemResponse,
    OrderResponse,
    PricingPlanResponse,
)

__all__ = [
    "AuthTokenResponse",
    "InvoiceResponse",
    "OrderItemResponse",
    "OrderResponse",
    "PricingPlanResponse",
    "SessionResponse",
    "SessionUserResponse",
    "UserLoginRequest",
    "UserLoginResponse",
    "UserRegisterRequest",
    "UserRegisterResponse",
    "UserResponse",
]
