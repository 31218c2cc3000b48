"""Authentication and session endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from planshop_backend.api.dependencies import (
    SettingsDep,
    get_auth_service,
    get_auth_session,
)
from planshop_backend.api.models import (
    AuthTokenResponse,
    SessionResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserResponse,
)
from planshop_backend.api.services import (
    AuthService,
    AuthSession,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from planshop_backend.database import get_session
from planshop_backend.settings import BackendSettings

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_session_cookie(
    response: Response,
    token: str,
    *,
    settings: BackendSettings,
    auth_service: AuthService,
) -> None:
    response.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=int(auth_service.access_token_ttl.total_seconds()),
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


@router.post(
    "/register",
    response_model=UserRegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_user(
    payload: UserRegisterRequest,
    response: Response,
    settings: SettingsDep,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserRegisterResponse:
    """Register a new user, issue an access token and open a session."""

    try:
        user, token = auth_service.register_user(
            session=session,
            email=payload.email,
            name=payload.name,
            password=payload.password,
            avatar=payload.avatar,
        )
    except UserAlreadyExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail="User already exists"
        ) from exc

    _set_session_cookie(response, token, settings=settings, auth_service=auth_service)
    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserRegisterResponse(user=user_model, token=token_model)


@router.post("/login", response_model=UserLoginResponse)
def login_user(
    payload: UserLoginRequest,
    response: Response,
    settings: SettingsDep,
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserLoginResponse:
    """Authenticate an existing user using e-mail and password."""

    try:
        user, token = auth_service.authenticate_user(
            session=session, email=payload.email, password=payload.password
        )
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials"
        ) from exc

    _set_session_cookie(response, token, settings=settings, auth_service=auth_service)
    user_model = UserResponse.model_validate(user, from_attributes=True)
    token_model = AuthTokenResponse(access_token=token)
    return UserLoginResponse(user=user_model, token=token_model)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout_user(settings: SettingsDep) -> Response:
    """Drop the session cookie."""

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/session", response_model=SessionResponse)
def read_session(
    auth_session: AuthSession | None = Depends(get_auth_session),
) -> SessionResponse:
    """Return the current session's user and expiry."""

    if auth_session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return SessionResponse.model_validate(auth_session, from_attributes=True)
