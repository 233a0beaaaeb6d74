"""SQLite row mappers for domain models."""

from __future__ import annotations

import sqlite3
from typing import Any, Dict

from car_rental.domain.models import Car, RentalRequest, RentalStatus

_U64_SIGN_BIT = 1 << 63
_U64_MODULUS = 1 << 64


def u64_to_db(value: int) -> int:
    """Fold an unsigned 64-bit value into SQLite's signed INTEGER range."""
    return value - _U64_MODULUS if value >= _U64_SIGN_BIT else value


def u64_from_db(value: int) -> int:
    return value + _U64_MODULUS if value < 0 else value


def car_from_row(row: sqlite3.Row) -> Car:
    return Car(
        id=u64_from_db(row["id"]),
        make=row["make"],
        model=row["model"],
        year=row["year"],
        available=bool(row["available"]),
    )


def car_to_record(car: Car) -> Dict[str, Any]:
    return {
        "id": u64_to_db(car.id),
        "make": car.make,
        "model": car.model,
        "year": car.year,
        "available": int(car.available),
    }


def rental_request_from_row(row: sqlite3.Row) -> RentalRequest:
    return RentalRequest(
        id=u64_from_db(row["id"]),
        car_id=u64_from_db(row["car_id"]),
        customer_id=u64_from_db(row["customer_id"]),
        start_date=u64_from_db(row["start_date"]),
        end_date=u64_from_db(row["end_date"]),
        status=RentalStatus(row["status"]),
    )


def rental_request_to_record(rental_request: RentalRequest) -> Dict[str, Any]:
    return {
        "id": u64_to_db(rental_request.id),
        "car_id": u64_to_db(rental_request.car_id),
        "customer_id": u64_to_db(rental_request.customer_id),
        "start_date": u64_to_db(rental_request.start_date),
        "end_date": u64_to_db(rental_request.end_date),
        "status": rental_request.status.value,
    }
