"""Generic identifier-keyed record storage on top of SQLite."""

from __future__ import annotations

import dataclasses
import sqlite3
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, Generic, List, Optional, Tuple, TypeVar

from car_rental.db.connection import transaction
from car_rental.logging_config import get_logger
from car_rental.repositories.mappers import u64_to_db

T = TypeVar("T")

# Folded u64 keys above 2**63 - 1 are negative, so they sort after the rest.
_ORDER_BY_ID = "ORDER BY id < 0, id"


class RecordStore(ABC, Generic[T]):
    """Insert, lookup, overwrite, delete and listing for one entity kind.

    Subclasses name the table and its columns and provide the row mappers.
    Absence is reported through return values: ``None`` from :meth:`get`
    and :meth:`update`, ``False`` from :meth:`delete`.
    """

    table: ClassVar[str]
    columns: ClassVar[Tuple[str, ...]]
    # Columns that may be used with :meth:`list_by`; each has an index.
    indexed_columns: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection
        self._connection.row_factory = sqlite3.Row
        self._logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def _from_row(self, row: sqlite3.Row) -> T:
        """Build an entity from a stored row."""

    @abstractmethod
    def _to_record(self, record: T) -> Dict[str, Any]:
        """Map an entity to column values in stored form."""

    def _encode(self, column: str, value: Any) -> Any:
        """Convert a filter value to its stored form."""
        return value

    def insert(self, record: T) -> T:
        values = self._to_record(record)
        placeholders = ", ".join("?" for _ in self.columns)
        try:
            with transaction(self._connection):
                self._connection.execute(
                    f"INSERT INTO {self.table} ({', '.join(self.columns)}) "
                    f"VALUES ({placeholders})",
                    tuple(values[column] for column in self.columns),
                )
        except Exception:
            self._logger.exception("Failed to insert into %s", self.table)
            raise
        return record

    def get(self, record_id: int) -> Optional[T]:
        try:
            row = self._connection.execute(
                f"SELECT * FROM {self.table} WHERE id = ?",
                (u64_to_db(record_id),),
            ).fetchone()
        except Exception:
            self._logger.exception("Failed to get %s id=%s", self.table, record_id)
            raise
        return self._from_row(row) if row else None

    def update(self, record_id: int, record: T) -> Optional[T]:
        """Overwrite every non-identifier column of ``record_id``."""
        record = dataclasses.replace(record, id=record_id)
        values = self._to_record(record)
        assignments = ", ".join(
            f"{column} = ?" for column in self.columns if column != "id"
        )
        params = [values[column] for column in self.columns if column != "id"]
        params.append(values["id"])
        try:
            with transaction(self._connection):
                cursor = self._connection.execute(
                    f"UPDATE {self.table} SET {assignments} WHERE id = ?",
                    params,
                )
        except Exception:
            self._logger.exception("Failed to update %s id=%s", self.table, record_id)
            raise
        if cursor.rowcount == 0:
            return None
        return record

    def delete(self, record_id: int) -> bool:
        try:
            with transaction(self._connection):
                cursor = self._connection.execute(
                    f"DELETE FROM {self.table} WHERE id = ?",
                    (u64_to_db(record_id),),
                )
        except Exception:
            self._logger.exception("Failed to delete %s id=%s", self.table, record_id)
            raise
        return cursor.rowcount > 0

    def list_all(self) -> List[T]:
        try:
            rows = self._connection.execute(
                f"SELECT * FROM {self.table} {_ORDER_BY_ID}"
            ).fetchall()
        except Exception:
            self._logger.exception("Failed to list %s", self.table)
            raise
        return [self._from_row(row) for row in rows]

    def list_where(self, predicate: Callable[[T], bool]) -> List[T]:
        return [record for record in self.list_all() if predicate(record)]

    def list_by(self, column: str, value: Any) -> List[T]:
        """Return records whose ``column`` equals ``value``, ordered by id."""
        if column not in self.indexed_columns:
            raise ValueError(f"{self.table} cannot be filtered by {column!r}")
        try:
            rows = self._connection.execute(
                f"SELECT * FROM {self.table} WHERE {column} = ? {_ORDER_BY_ID}",
                (self._encode(column, value),),
            ).fetchall()
        except Exception:
            self._logger.exception(
                "Failed to list %s by %s=%s", self.table, column, value
            )
            raise
        return [self._from_row(row) for row in rows]

    def count(self) -> int:
        try:
            row = self._connection.execute(
                f"SELECT COUNT(*) AS total FROM {self.table}"
            ).fetchone()
        except Exception:
            self._logger.exception("Failed to count %s", self.table)
            raise
        return row["total"]
