"""Authentication domain logic and session resolution."""

from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Tuple
from uuid import UUID, uuid4

import jwt
from sqlalchemy.orm import Session

from planshop_backend.database import UserRepository, UserSchema
from planshop_backend.settings import BackendSettings, get_settings
from planshop_backend.shared import UserRole

logger = logging.getLogger(__name__)


class UserAlreadyExistsError(Exception):
    """Raised when attempting to create a duplicate user."""


class InvalidCredentialsError(Exception):
    """Raised when supplied credentials are invalid."""


@dataclass(slots=True)
class TokenPayload:
    """Represents encoded token metadata."""

    sub: str
    exp: datetime


@dataclass(slots=True)
class AuthSession:
    """An authenticated request: who is calling and until when."""

    user: UserSchema
    expires: datetime


class AuthService:
    """Handles password hashing, token generation and session lookup."""

    def __init__(
        self,
        *,
        secret_key: str | None = None,
        algorithm: str = "HS256",
        access_token_ttl_minutes: int | None = None,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._secret_key = secret_key or config.auth_secret_key
        self._algorithm = algorithm
        self._access_token_ttl = timedelta(
            minutes=access_token_ttl_minutes or config.access_token_ttl_minutes
        )

    @property
    def access_token_ttl(self) -> timedelta:
        return self._access_token_ttl

    def hash_password(self, password: str) -> str:
        """Hash a password using PBKDF2 with a random salt."""

        salt = secrets.token_bytes(16)
        digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, 100_000)
        return f"{base64.b64encode(salt).decode()}:{base64.b64encode(digest).decode()}"

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Validate a password against a stored PBKDF2 hash."""

        try:
            salt_b64, hash_b64 = password_hash.split(":", 1)
        except ValueError:
            return False
        salt = base64.b64decode(salt_b64.encode())
        expected = base64.b64decode(hash_b64.encode())
        actual = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, 100_000)
        return hmac.compare_digest(actual, expected)

    def create_access_token(self, subject: str) -> str:
        expires_at = datetime.now(tz=timezone.utc) + self._access_token_ttl
        payload = {"sub": subject, "exp": expires_at}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> TokenPayload:
        data = jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"require": ["exp", "sub"]},
        )
        return TokenPayload(
            sub=data["sub"], exp=datetime.fromtimestamp(data["exp"], tz=timezone.utc)
        )

    def resolve_session(
        self, *, session: Session, token: str | None
    ) -> AuthSession | None:
        """Return the session behind ``token``, or ``None`` when there is none.

        Missing, malformed or expired tokens and tokens naming an unknown
        user all count as "no session".
        """

        if not token:
            return None
        try:
            payload = self.decode_access_token(token)
        except jwt.PyJWTError as exc:
            logger.debug("Rejected session token: %s", exc)
            return None
        try:
            user_id = UUID(payload.sub)
        except ValueError:
            logger.debug("Rejected session token with subject %r", payload.sub)
            return None

        user = UserRepository(session).get_by_id(user_id)
        if user is None:
            logger.debug("Session token refers to missing user %s", user_id)
            return None
        return AuthSession(user=user, expires=payload.exp)

    def register_user(
        self,
        *,
        session: Session,
        email: str,
        name: str,
        password: str,
        avatar: str | None = None,
    ) -> Tuple[UserSchema, str]:
        repository = UserRepository(session)
        if repository.get_by_email(email) is not None:
            raise UserAlreadyExistsError(email)

        user = UserSchema(
            id=uuid4(),
            email=email,
            name=name,
            avatar=avatar,
            role=UserRole.USER,
            password_hash=self.hash_password(password),
        )
        user = repository.add(user)
        logger.info("Registered user %s", user.id)
        token = self.create_access_token(str(user.id))
        return user, token

    def authenticate_user(
        self, *, session: Session, email: str, password: str
    ) -> Tuple[UserSchema, str]:
        repository = UserRepository(session)
        user = repository.get_by_email(email)
        if user is None or not self.verify_password(password, user.password_hash):
            raise InvalidCredentialsError(email)
        logger.info("User %s signed in", user.id)
        token = self.create_access_token(str(user.id))
        return user, token
