"""Shared enumerations used across the backend."""

from enum import StrEnum


class UserRole(StrEnum):
    """Access level attached to every account."""

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class BillingInterval(StrEnum):
    """How often a pricing plan is charged."""

    MONTH = "month"
    YEAR = "year"


class OrderStatus(StrEnum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class InvoiceStatus(StrEnum):
    DRAFT = "draft"
    OPEN = "open"
    PAID = "paid"
    VOID = "void"
