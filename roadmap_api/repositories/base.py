"""CRUD Repository — one parameterized statement per list/get/create/update/delete.

Invariants:
    - Exactly one SQL statement per public method (plus COMMIT for writes)
    - create() stamps created_at == modified_at with a fresh cuid
    - update() overwrites every supplied column and refreshes modified_at;
      cuid, created_at, and parent_key are never written after insert
    - Zero matching rows on get/update/delete -> ResourceNotFoundError, nothing mutated
    - Any SQLAlchemyError -> rollback, ERROR log with the statement, DatabaseError

Design Decisions:
    - ORM-enabled INSERT/UPDATE/DELETE ... RETURNING over load-mutate-flush:
      one round-trip per request, row returned as written by the store
    - Values keyed by mapped attributes (not strings): physical column names
      (displaysequence, ...) differ from the Python attribute names
"""

import logging
import time
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, insert, select, update
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from roadmap_api.core.errors import DatabaseError, ResourceNotFoundError
from roadmap_api.core.identity import new_cuid, utcnow
from roadmap_api.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """Table-parameterized CRUD over a single ORM model."""

    model: type[ModelT]
    label: str
    order_by: tuple = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    # --- statements -----------------------------------------------------------

    async def list(self, parent_key: str | None = None) -> Sequence[ModelT]:
        stmt: Select = select(self.model)
        if parent_key is not None:
            stmt = stmt.where(self.model.parent_key == parent_key)
        stmt = stmt.order_by(*self.order_by)
        return await self._run(stmt, "select")

    async def get(self, cuid: str) -> ModelT:
        rows = await self._run(
            select(self.model).where(self.model.cuid == cuid), "select",
        )
        return self._one_or_404(rows, cuid)

    async def exists(self, cuid: str, parent_key: str | None = None) -> bool:
        stmt = select(self.model.cuid).where(self.model.cuid == cuid)
        if parent_key is not None:
            stmt = stmt.where(self.model.parent_key == parent_key)
        return bool(await self._run(stmt, "select"))

    async def create(
        self, values: dict[str, Any], parent_key: str | None = None,
    ) -> ModelT:
        now = utcnow()
        row = {"cuid": new_cuid(), "created_at": now, "modified_at": now}
        if parent_key is not None:
            row["parent_key"] = parent_key
        row.update(values)
        stmt = (
            insert(self.model)
            .values(self._columns(row))
            .returning(self.model)
        )
        rows = await self._run(stmt, "insert", commit=True)
        return rows[0]

    async def update(self, cuid: str, values: dict[str, Any]) -> ModelT:
        row = {**values, "modified_at": utcnow()}
        stmt = (
            update(self.model)
            .where(self.model.cuid == cuid)
            .values(self._columns(row))
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        rows = await self._run(stmt, "update", commit=True)
        return self._one_or_404(rows, cuid)

    async def delete(self, cuid: str) -> str:
        stmt = (
            delete(self.model)
            .where(self.model.cuid == cuid)
            .returning(self.model.cuid)
        )
        rows = await self._run(stmt, "delete", commit=True)
        return self._one_or_404(rows, cuid)

    # --- helpers --------------------------------------------------------------

    def _columns(self, values: dict[str, Any]) -> dict:
        return {getattr(self.model, key): value for key, value in values.items()}

    def _one_or_404(self, rows: Sequence, cuid: str):
        if not rows:
            raise ResourceNotFoundError(self.label, cuid)
        return rows[0]

    async def _run(
        self, stmt: Executable, operation: str, commit: bool = False,
    ) -> Sequence:
        """Execute one statement, log timing, and map driver failures."""
        start = time.perf_counter()
        try:
            result = await self.db.scalars(stmt)
            rows = result.all()
            if commit:
                await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            detail = str(e.orig) if isinstance(e, DBAPIError) else str(e)
            logger.error(
                "Error executing query",
                extra={
                    "statement": getattr(e, "statement", None) or str(stmt),
                    "operation": operation,
                    "entity": self.label,
                },
                exc_info=True,
            )
            raise DatabaseError(detail, operation) from e
        logger.debug(
            "Executed query",
            extra={
                "statement": str(stmt),
                "operation": operation,
                "entity": self.label,
                "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                "row_count": len(rows),
            },
        )
        return rows
