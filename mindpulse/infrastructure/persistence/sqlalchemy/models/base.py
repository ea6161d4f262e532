"""
SQLAlchemy declarative base for all ORM models.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase


class Base(AsyncAttrs, DeclarativeBase):
    """SQLAlchemy 2.0 declarative base with async support."""

    def __repr__(self) -> str:
        attrs = [f"{key}={value!r}" for key, value in self.__dict__.items() if not key.startswith("_")]
        return f"{self.__class__.__name__}({', '.join(attrs)})"
