"""Shared enumerations and cross-cutting helpers for the backend."""

from planshop_backend.shared.enums import (
    BillingInterval,
    InvoiceStatus,
    OrderStatus,
    UserRole,
)

__all__ = [
    "BillingInterval",
    "InvoiceStatus",
    "OrderStatus",
    "UserRole",
]
