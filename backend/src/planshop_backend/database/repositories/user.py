"""Repository helpers for working with users."""

from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from planshop_backend.database.schemas import UserSchema
from planshop_backend.shared import UserRole


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        """Return user entity by user's e-mail address."""
        stmt = select(UserSchema).where(UserSchema.email == email)
        return self._session.scalar(stmt)

    def is_admin(self, user_id: UUID) -> bool:
        """Return whether the stored user currently holds the admin role."""
        stmt = select(
            exists().where(UserSchema.id == user_id, UserSchema.role == UserRole.ADMIN)
        )
        return bool(self._session.scalar(stmt))

    def add(self, user: UserSchema) -> UserSchema:
        """Add new user to database."""
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user
