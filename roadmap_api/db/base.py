"""SQLAlchemy Declarative Base — shared base class and common columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every entity carries an internal integer id plus an external cuid

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - Physical names are lower case (what PostgreSQL folds unquoted identifiers to)
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all Roadmap ORM models."""
    pass


class EntityMixin:
    """Identity and audit columns shared by every roadmap table."""

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    cuid: Mapped[str] = mapped_column(
        String(36), unique=True, index=True, nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    modified_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
