"""Per-entity identifier sequences."""

from __future__ import annotations

import sqlite3

from car_rental.config import FIRST_ID
from car_rental.db.connection import transaction
from car_rental.logging_config import get_logger


class IdAllocator:
    """Hands out increasing identifiers from a named sequence.

    Each call to :meth:`next` commits the advanced counter on its own, so an
    identifier is consumed even when the caller never stores a record
    under it.
    """

    def __init__(
        self,
        connection: sqlite3.Connection,
        sequence: str,
        first_id: int = FIRST_ID,
    ) -> None:
        self._connection = connection
        self._sequence = sequence
        self._logger = get_logger(self.__class__.__name__)
        try:
            with transaction(self._connection):
                self._connection.execute(
                    "INSERT OR IGNORE INTO id_sequences (name, next_id) VALUES (?, ?)",
                    (sequence, first_id),
                )
        except Exception:
            self._logger.exception("Failed to initialize sequence %s", sequence)
            raise

    @property
    def sequence(self) -> str:
        return self._sequence

    def peek(self) -> int:
        """Return the identifier the next allocation will hand out."""
        try:
            row = self._connection.execute(
                "SELECT next_id FROM id_sequences WHERE name = ?",
                (self._sequence,),
            ).fetchone()
        except Exception:
            self._logger.exception("Failed to read sequence %s", self._sequence)
            raise
        return row["next_id"]

    def next(self) -> int:
        try:
            with transaction(self._connection):
                current = self._connection.execute(
                    "SELECT next_id FROM id_sequences WHERE name = ?",
                    (self._sequence,),
                ).fetchone()["next_id"]
                self._connection.execute(
                    "UPDATE id_sequences SET next_id = ? WHERE name = ?",
                    (current + 1, self._sequence),
                )
        except Exception:
            self._logger.exception("Failed to advance sequence %s", self._sequence)
            raise
        return current
