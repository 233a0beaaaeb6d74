"""Repository for rental request persistence."""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List

from car_rental.domain.models import RentalRequest
from car_rental.repositories.mappers import (
    rental_request_from_row,
    rental_request_to_record,
    u64_to_db,
)
from car_rental.repositories.record_store import RecordStore


class RentalRequestRepo(RecordStore[RentalRequest]):
    """Stored rental requests keyed by id, indexed by car and customer."""

    table = "rental_requests"
    columns = ("id", "car_id", "customer_id", "start_date", "end_date", "status")
    indexed_columns = ("car_id", "customer_id")

    def _from_row(self, row: sqlite3.Row) -> RentalRequest:
        return rental_request_from_row(row)

    def _to_record(self, record: RentalRequest) -> Dict[str, Any]:
        return rental_request_to_record(record)

    def _encode(self, column: str, value: Any) -> Any:
        return u64_to_db(value)

    def list_for_car(self, car_id: int) -> List[RentalRequest]:
        return self.list_by("car_id", car_id)

    def list_for_customer(self, customer_id: int) -> List[RentalRequest]:
        return self.list_by("customer_id", customer_id)
