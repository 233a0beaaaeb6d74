"""Repository for car persistence."""

from __future__ import annotations

import sqlite3
from typing import Any, Dict

from car_rental.domain.models import Car
from car_rental.repositories.mappers import car_from_row, car_to_record
from car_rental.repositories.record_store import RecordStore


class CarRepo(RecordStore[Car]):
    """Stored cars keyed by id."""

    table = "cars"
    columns = ("id", "make", "model", "year", "available")

    def _from_row(self, row: sqlite3.Row) -> Car:
        return car_from_row(row)

    def _to_record(self, record: Car) -> Dict[str, Any]:
        return car_to_record(record)
