"""Storage context owning the connection, sequences and record stores."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from types import TracebackType
from typing import Optional

from car_rental.config import CAR_SEQUENCE, FIRST_ID, RENTAL_REQUEST_SEQUENCE
from car_rental.db.connection import get_connection
from car_rental.db.schema import init_db
from car_rental.logging_config import get_logger
from car_rental.paths import get_db_path
from car_rental.repositories import CarRepo, IdAllocator, RentalRequestRepo

MEMORY_DATABASE = ":memory:"


class Storage:
    """All mutable state of the record store.

    The schema and both id sequences are created on first use of a
    database; reopening an existing file continues its sequences.
    """

    def __init__(self, connection: sqlite3.Connection, first_id: int = FIRST_ID) -> None:
        self._logger = get_logger(self.__class__.__name__)
        try:
            init_db(connection)
        except Exception:
            self._logger.exception("Failed to initialize database schema")
            raise
        self.connection = connection
        self.car_ids = IdAllocator(connection, CAR_SEQUENCE, first_id)
        self.rental_request_ids = IdAllocator(
            connection, RENTAL_REQUEST_SEQUENCE, first_id
        )
        self.cars = CarRepo(connection)
        self.rental_requests = RentalRequestRepo(connection)

    @classmethod
    def open(cls, database_path: Optional[Path | str] = None) -> "Storage":
        """Open (creating if needed) the store at ``database_path``.

        Defaults to the database file in the per-user data directory.
        """
        path = database_path if database_path is not None else get_db_path()
        return cls(get_connection(path))

    @classmethod
    def in_memory(cls) -> "Storage":
        return cls(get_connection(MEMORY_DATABASE))

    def close(self) -> None:
        self.connection.close()

    def __enter__(self) -> "Storage":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
