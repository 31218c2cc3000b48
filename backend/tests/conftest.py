"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from datetime import datetime
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from planshop_backend.api import create_api
from planshop_backend.api.services import AuthService
from planshop_backend.database import (
    BaseSchema,
    DatabaseService,
    InvoiceSchema,
    OrderItemSchema,
    OrderSchema,
    PricingPlanSchema,
    UserSchema,
    get_database,
)
from planshop_backend.settings import get_settings
from planshop_backend.shared import InvoiceStatus, OrderStatus, UserRole

TEST_PASSWORD = "Password123"  # noqa: S105


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", "test-secret-key")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def database() -> Iterator[DatabaseService]:
    """In-memory SQLite database shared by every connection of one test."""
    service = DatabaseService(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BaseSchema.metadata.create_all(service.engine)
    yield service
    BaseSchema.metadata.drop_all(service.engine)
    service.engine.dispose()


@pytest.fixture
def client(database: DatabaseService) -> Iterator[TestClient]:
    app = create_api(get_settings())
    app.dependency_overrides[get_database] = lambda: database
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_service() -> AuthService:
    return AuthService(settings=get_settings())


@pytest.fixture
def create_user(
    database: DatabaseService, auth_service: AuthService
) -> Callable[..., UserSchema]:
    def _create(
        email: str = "customer@planshop.dev",
        *,
        name: str = "Customer",
        role: UserRole = UserRole.USER,
        password: str = TEST_PASSWORD,
    ) -> UserSchema:
        user = UserSchema(
            id=uuid4(),
            email=email,
            name=name,
            avatar=f"https://cdn.planshop.dev/avatars/{name.lower()}.png",
            role=role,
            password_hash=auth_service.hash_password(password),
        )
        with database.session() as session:
            session.add(user)
        return user

    return _create


@pytest.fixture
def auth_headers(auth_service: AuthService) -> Callable[[UserSchema], dict[str, str]]:
    def _headers(user: UserSchema) -> dict[str, str]:
        token = auth_service.create_access_token(str(user.id))
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def create_plan(database: DatabaseService) -> Callable[..., PricingPlanSchema]:
    def _create(
        name: str, *, price_cents: int = 1_000, is_active: bool = True
    ) -> PricingPlanSchema:
        plan = PricingPlanSchema(
            id=uuid4(),
            name=name,
            description=f"{name} plan",
            price_cents=price_cents,
            currency="USD",
            is_active=is_active,
        )
        with database.session() as session:
            session.add(plan)
        return plan

    return _create


@pytest.fixture
def create_order(database: DatabaseService) -> Callable[..., UUID]:
    """Store an order and return its id.

    ``invoice_times`` gives the creation time of every invoice; invoice
    numbers are ``"<order label>-<index>"`` in the order the times are given.
    """

    def _create(
        user: UserSchema,
        *,
        created_at: datetime,
        label: str,
        plans: Sequence[PricingPlanSchema] = (),
        invoice_times: Sequence[datetime] = (),
    ) -> UUID:
        order_id = uuid4()
        order = OrderSchema(
            id=order_id,
            user_id=user.id,
            status=OrderStatus.PAID,
            total_cents=sum(plan.price_cents for plan in plans),
            currency="USD",
            created_at=created_at,
            updated_at=created_at,
        )
        order.items = [
            OrderItemSchema(
                id=uuid4(),
                plan_id=plan.id,
                quantity=1,
                unit_price_cents=plan.price_cents,
            )
            for plan in plans
        ]
        order.invoices = [
            InvoiceSchema(
                id=uuid4(),
                number=f"{label}-{index}",
                amount_cents=order.total_cents,
                status=InvoiceStatus.PAID,
                created_at=issued_at,
            )
            for index, issued_at in enumerate(invoice_times)
        ]
        with database.session() as session:
            session.add(order)
        return order_id

    return _create
