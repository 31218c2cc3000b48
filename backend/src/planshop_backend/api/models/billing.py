"""Pydantic models for pricing plan and order payloads."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from planshop_backend.shared import BillingInterval, InvoiceStatus, OrderStatus


class PricingPlanResponse(BaseModel):
    """A catalog plan."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    name: str
    description: str | None
    price_cents: int
    currency: str
    billing_interval: BillingInterval
    is_active: bool
    created_at: datetime
    updated_at: datetime


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    plan_id: UUID
    quantity: int
    unit_price_cents: int
    plan: PricingPlanResponse


class InvoiceResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    number: str
    amount_cents: int
    status: InvoiceStatus
    created_at: datetime


class OrderResponse(BaseModel):
    """An order with its line items and most recent invoices."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    user_id: UUID
    status: OrderStatus
    total_cents: int
    currency: str
    created_at: datetime
    updated_at: datetime
    items: list[OrderItemResponse]
    invoices: list[InvoiceResponse]
