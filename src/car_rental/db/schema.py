"""Database schema management."""

from __future__ import annotations

import sqlite3


def init_db(connection: sqlite3.Connection) -> None:
    """Initialize tables and indexes if they do not exist.

    Identifiers are assigned from ``id_sequences`` rather than by SQLite, so
    the ``id`` columns are plain primary keys without AUTOINCREMENT. Every
    u64 column holds the two's-complement signed form of its value.
    """
    connection.executescript(
        """
        CREATE TABLE IF NOT EXISTS id_sequences (
            name TEXT PRIMARY KEY,
            next_id INTEGER NOT NULL
        );

        CREATE TABLE IF NOT EXISTS cars (
            id INTEGER PRIMARY KEY,
            make TEXT NOT NULL,
            model TEXT NOT NULL,
            year INTEGER NOT NULL,
            available INTEGER NOT NULL DEFAULT 1
        );

        CREATE TABLE IF NOT EXISTS rental_requests (
            id INTEGER PRIMARY KEY,
            car_id INTEGER NOT NULL,
            customer_id INTEGER NOT NULL,
            start_date INTEGER NOT NULL,
            end_date INTEGER NOT NULL,
            status TEXT NOT NULL
                CHECK (status IN ('Pending', 'Active', 'Completed', 'Canceled'))
        );

        CREATE INDEX IF NOT EXISTS idx_rental_requests_car_id
            ON rental_requests(car_id);
        CREATE INDEX IF NOT EXISTS idx_rental_requests_customer_id
            ON rental_requests(customer_id);
        """
    )
