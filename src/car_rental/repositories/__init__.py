"""Repositories for data access."""

from car_rental.repositories.car_repo import CarRepo
from car_rental.repositories.id_allocator import IdAllocator
from car_rental.repositories.mappers import (
    car_from_row,
    car_to_record,
    rental_request_from_row,
    rental_request_to_record,
    u64_from_db,
    u64_to_db,
)
from car_rental.repositories.record_store import RecordStore
from car_rental.repositories.rental_request_repo import RentalRequestRepo

__all__ = [
    "CarRepo",
    "car_from_row",
    "car_to_record",
    "IdAllocator",
    "RecordStore",
    "RentalRequestRepo",
    "rental_request_from_row",
    "rental_request_to_record",
    "u64_from_db",
    "u64_to_db",
]
