"""Order, order item and invoice database schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from planshop_backend.database.base import BaseSchema, enum_column
from planshop_backend.database.schemas.pricing_plan import PricingPlanSchema
from planshop_backend.shared import InvoiceStatus, OrderStatus


class OrderSchema(BaseSchema):
    """A purchase placed by a user."""

    __tablename__ = "orders"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    user_id: Mapped[UUID] = mapped_column(
        Uuid(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[OrderStatus] = mapped_column(
        enum_column(OrderStatus, "order_status"),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    total_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    currency: Mapped[str] = mapped_column(String(3), nullable=False, default="USD")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    items: Mapped[list[OrderItemSchema]] = relationship(
        back_populates="order", cascade="all, delete-orphan"
    )
    invoices: Mapped[list[InvoiceSchema]] = relationship(
        back_populates="order",
        cascade="all, delete-orphan",
        order_by=lambda: [InvoiceSchema.created_at.desc(), InvoiceSchema.id.desc()],
    )


class OrderItemSchema(BaseSchema):
    """A single pricing plan line on an order."""

    __tablename__ = "order_items"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    order_id: Mapped[UUID] = mapped_column(
        Uuid(), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    plan_id: Mapped[UUID] = mapped_column(
        Uuid(), ForeignKey("pricing_plans.id"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    unit_price_cents: Mapped[int] = mapped_column(Integer, nullable=False)

    order: Mapped[OrderSchema] = relationship(back_populates="items")
    plan: Mapped[PricingPlanSchema] = relationship()


class InvoiceSchema(BaseSchema):
    """Billing document issued against an order."""

    __tablename__ = "invoices"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    order_id: Mapped[UUID] = mapped_column(
        Uuid(), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    number: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[InvoiceStatus] = mapped_column(
        enum_column(InvoiceStatus, "invoice_status"),
        nullable=False,
        default=InvoiceStatus.DRAFT,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    order: Mapped[OrderSchema] = relationship(back_populates="invoices")
