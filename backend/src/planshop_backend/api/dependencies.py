"""Dependency providers for FastAPI routers."""

from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from planshop_backend.api.services import AuthService, AuthSession, BillingService
from planshop_backend.database import UserRepository, UserSchema, get_session
from planshop_backend.database.dependencies import SettingsDep

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)
_billing_service = BillingService()


def get_auth_service(settings: SettingsDep) -> AuthService:
    """Return an :class:`AuthService` bound to the current settings."""

    return AuthService(settings=settings)


def get_billing_service() -> BillingService:
    """Return the shared :class:`BillingService` instance."""

    return _billing_service


def get_auth_session(
    request: Request,
    settings: SettingsDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthSession | None:
    """Resolve the caller's session from a bearer token or the session cookie."""

    if credentials is not None:
        token = credentials.credentials
    else:
        token = request.cookies.get(settings.session_cookie_name)
    return auth_service.resolve_session(session=session, token=token)


def require_user(
    auth_session: AuthSession | None = Depends(get_auth_session),
) -> UserSchema:
    """Return the signed-in user or reject the request with ``401``."""

    if auth_session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return auth_session.user


def require_admin(
    request: Request,
    auth_session: AuthSession | None = Depends(get_auth_session),
    session: Session = Depends(get_session),
) -> UserSchema:
    """Return the signed-in admin or reject the request with ``403``."""

    if auth_session is None:
        logger.info("Denied %s: no session", request.url.path)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    user = auth_session.user
    if not UserRepository(session).is_admin(user.id):
        logger.info("Denied %s: user %s is not an admin", request.url.path, user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user


__all__ = [
    "get_auth_service",
    "get_auth_session",
    "get_billing_service",
    "require_admin",
    "require_user",
]
