"""Shared table repository used by every catalog entity.

Each concrete repository names its table and the columns a write may set.
Reads return plain dicts keyed by column name; writes run in their own
transaction and report the affected row count. Required-field validation is
the caller's job and is never repeated here.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, ClassVar, Dict, Generator, List, Optional, Tuple

from sqlalchemy import text as sql_text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from catalog.db.base import transaction
from catalog.errors import StoreFailure

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str) -> Generator[None, None, None]:
    """Translate driver faults into StoreFailure carrying the raw message."""
    try:
        yield
    except SQLAlchemyError as exc:
        message = str(getattr(exc, "orig", None) or exc)
        logger.error("store_failure operation=%s error=%s", operation, message, exc_info=True)
        raise StoreFailure(message) from exc


class TableRepository:
    table: ClassVar[str]
    # Columns settable by create/replace, in insert order
    write_columns: ClassVar[Tuple[str, ...]]
    # Extra server-assigned columns returned by reads
    extra_read_columns: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @property
    def read_columns(self) -> Tuple[str, ...]:
        return ("id",) + self.write_columns + self.extra_read_columns

    def _select(self) -> str:
        return f"SELECT {', '.join(self.read_columns)} FROM {self.table}"

    def prepare_create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Map payload fields to column values for an INSERT."""
        return {c: fields.get(c) for c in self.write_columns}

    def prepare_replace(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Map payload fields to column values for a full-replace UPDATE.

        Every write column is set; a field absent from the payload becomes NULL.
        """
        return {c: fields.get(c) for c in self.write_columns}

    def list(self) -> List[Dict[str, Any]]:
        with store_errors(f"{self.table}.list"):
            with self.engine.connect() as conn:
                rows = conn.execute(sql_text(self._select())).mappings().all()
        return [dict(r) for r in rows]

    def get(self, item_id: int) -> Optional[Dict[str, Any]]:
        with store_errors(f"{self.table}.get"):
            with self.engine.connect() as conn:
                row = conn.execute(
                    sql_text(f"{self._select()} WHERE id = :id"),
                    {"id": item_id},
                ).mappings().first()
        return dict(row) if row is not None else None

    def create(self, fields: Dict[str, Any]) -> int:
        values = self.prepare_create(fields)
        cols = ", ".join(values)
        params = ", ".join(f":{c}" for c in values)
        with store_errors(f"{self.table}.create"):
            with transaction(self.engine) as conn:
                result = conn.execute(
                    sql_text(f"INSERT INTO {self.table} ({cols}) VALUES ({params})"),
                    values,
                )
                new_id = int(result.lastrowid)
        logger.info("%s_created id=%s", self.table, new_id)
        return new_id

    def replace(self, item_id: int, fields: Dict[str, Any]) -> int:
        values = self.prepare_replace(fields)
        assignments = ", ".join(f"{c} = :{c}" for c in values)
        with store_errors(f"{self.table}.replace"):
            with transaction(self.engine) as conn:
                result = conn.execute(
                    sql_text(f"UPDATE {self.table} SET {assignments} WHERE id = :id"),
                    {**values, "id": item_id},
                )
                changed = int(result.rowcount or 0)
        logger.info("%s_replaced id=%s rows=%s", self.table, item_id, changed)
        return changed

    def delete(self, item_id: int) -> int:
        with store_errors(f"{self.table}.delete"):
            with transaction(self.engine) as conn:
                result = conn.execute(
                    sql_text(f"DELETE FROM {self.table} WHERE id = :id"),
                    {"id": item_id},
                )
                removed = int(result.rowcount or 0)
        logger.info("%s_deleted id=%s rows=%s", self.table, item_id, removed)
        return removed


__all__ = ["TableRepository", "store_errors"]
