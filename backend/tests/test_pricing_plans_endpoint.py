from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING
from uuid import uuid4

import jwt
import pytest

from planshop_backend.database import UserSchema
from planshop_backend.shared import UserRole

if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi.testclient import TestClient

    from planshop_backend.api.services import AuthService
    from planshop_backend.database import DatabaseService, PricingPlanSchema

ENDPOINT = "/api/admin/pricing-plans"


def test_requires_session(client: TestClient) -> None:
    response = client.get(ENDPOINT)

    assert response.status_code == 403


def test_rejects_garbage_token(client: TestClient) -> None:
    response = client.get(ENDPOINT, headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 403


def test_rejects_expired_token(
    client: TestClient, create_user: Callable[..., UserSchema]
) -> None:
    admin = create_user("admin@planshop.dev", role=UserRole.ADMIN)
    token = jwt.encode(
        {"sub": str(admin.id), "exp": datetime.now(UTC) - timedelta(minutes=1)},
        "test-secret-key",
        algorithm="HS256",
    )

    response = client.get(ENDPOINT, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


def test_rejects_token_for_unknown_user(
    client: TestClient, auth_service: AuthService
) -> None:
    token = auth_service.create_access_token(str(uuid4()))

    response = client.get(ENDPOINT, headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


@pytest.mark.parametrize("role", [UserRole.USER, UserRole.MANAGER])
def test_rejects_non_admin(
    client: TestClient,
    create_user: Callable[..., UserSchema],
    create_plan: Callable[..., PricingPlanSchema],
    auth_headers: Callable[[UserSchema], dict[str, str]],
    role: UserRole,
) -> None:
    create_plan("Starter")
    user = create_user(role=role)

    response = client.get(ENDPOINT, headers=auth_headers(user))

    assert response.status_code == 403
    assert response.json() == {"detail": "Forbidden"}


def test_admin_receives_every_plan_in_storage_order(
    client: TestClient,
    create_user: Callable[..., UserSchema],
    create_plan: Callable[..., PricingPlanSchema],
    auth_headers: Callable[[UserSchema], dict[str, str]],
) -> None:
    plans = [
        create_plan("Starter", price_cents=900),
        create_plan("Legacy", price_cents=500, is_active=False),
        create_plan("Business", price_cents=4_900),
    ]
    admin = create_user("admin@planshop.dev", role=UserRole.ADMIN)

    response = client.get(ENDPOINT, headers=auth_headers(admin))

    assert response.status_code == 200
    data = response.json()
    assert [plan["id"] for plan in data] == [str(plan.id) for plan in plans]
    assert data[1]["name"] == "Legacy"
    assert data[1]["is_active"] is False
    assert data[0]["price_cents"] == 900
    assert data[0]["billing_interval"] == "month"


def test_admin_receives_empty_catalog(
    client: TestClient,
    create_user: Callable[..., UserSchema],
    auth_headers: Callable[[UserSchema], dict[str, str]],
) -> None:
    admin = create_user("admin@planshop.dev", role=UserRole.ADMIN)

    response = client.get(ENDPOINT, headers=auth_headers(admin))

    assert response.status_code == 200
    assert response.json() == []


def test_admin_session_cookie_is_accepted(
    client: TestClient,
    create_user: Callable[..., UserSchema],
    create_plan: Callable[..., PricingPlanSchema],
    auth_service: AuthService,
) -> None:
    create_plan("Starter")
    admin = create_user("admin@planshop.dev", role=UserRole.ADMIN)
    client.cookies.set(
        "planshop.session-token", auth_service.create_access_token(str(admin.id))
    )

    response = client.get(ENDPOINT)

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_demoted_admin_loses_access(
    client: TestClient,
    database: DatabaseService,
    create_user: Callable[..., UserSchema],
    auth_headers: Callable[[UserSchema], dict[str, str]],
) -> None:
    admin = create_user("admin@planshop.dev", role=UserRole.ADMIN)
    headers = auth_headers(admin)
    assert client.get(ENDPOINT, headers=headers).status_code == 200

    with database.session() as session:
        session.get(UserSchema, admin.id).role = UserRole.USER

    assert client.get(ENDPOINT, headers=headers).status_code == 403
