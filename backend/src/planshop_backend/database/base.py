"""Declarative base for SQLAlchemy models."""

from enum import Enum as PyEnum

from sqlalchemy import Enum
from sqlalchemy.orm import DeclarativeBase


def enum_column(enum_class: type[PyEnum], name: str) -> Enum:
    """Build an ``Enum`` column type that persists member values, not names."""
    return Enum(
        enum_class,
        name=name,
        values_callable=lambda members: [member.value for member in members],
    )


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas."""

    pass
