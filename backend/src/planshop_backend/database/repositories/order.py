"""Repository helpers for order history."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session, aliased, selectinload
from sqlalchemy.orm.attributes import set_committed_value

from planshop_backend.database.schemas import (
    InvoiceSchema,
    OrderItemSchema,
    OrderSchema,
)


class OrderRepository:
    """Encapsulates read operations for :class:`OrderSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_user(
        self, user_id: UUID, *, invoice_limit: int
    ) -> list[OrderSchema]:
        """Return the user's orders, newest first, with items and recent invoices.

        Each order's ``items`` are loaded together with their plan. The
        ``invoices`` collection is populated with at most ``invoice_limit``
        entries, newest first, so the returned objects must be treated as
        read-only snapshots: flushing them would not delete older invoices,
        but reading ``order.invoices`` will not show them either.
        """
        stmt = (
            select(OrderSchema)
            .where(OrderSchema.user_id == user_id)
            .options(selectinload(OrderSchema.items).selectinload(OrderItemSchema.plan))
            .order_by(OrderSchema.created_at.desc(), OrderSchema.id.desc())
        )
        orders = list(self._session.scalars(stmt))
        if not orders:
            return orders

        recent = self._recent_invoices([order.id for order in orders], invoice_limit)
        for order in orders:
            set_committed_value(order, "invoices", recent.get(order.id, []))
        return orders

    def _recent_invoices(
        self, order_ids: Sequence[UUID], limit: int
    ) -> dict[UUID, list[InvoiceSchema]]:
        """Fetch the newest ``limit`` invoices of every order in one query."""
        if limit <= 0:
            return {}

        position = (
            func.row_number()
            .over(
                partition_by=InvoiceSchema.order_id,
                order_by=(InvoiceSchema.created_at.desc(), InvoiceSchema.id.desc()),
            )
            .label("position")
        )
        ranked = (
            select(InvoiceSchema, position)
            .where(InvoiceSchema.order_id.in_(order_ids))
            .subquery()
        )
        invoice = aliased(InvoiceSchema, ranked)
        stmt = (
            select(invoice)
            .where(ranked.c.position <= limit)
            .order_by(ranked.c.order_id, ranked.c.position)
        )

        grouped: dict[UUID, list[InvoiceSchema]] = defaultdict(list)
        for row in self._session.scalars(stmt):
            grouped[row.order_id].append(row)
        return grouped
