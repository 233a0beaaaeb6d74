"""Service container for callers of the record store."""

from __future__ import annotations

from dataclasses import dataclass

from car_rental.services.car_service import CarService
from car_rental.services.rental_request_service import RentalRequestService
from car_rental.storage import Storage


@dataclass(frozen=True)
class AppServices:
    """Shared storage and services for dependency injection."""

    storage: Storage
    car_service: CarService
    rental_request_service: RentalRequestService


def build_services(storage: Storage) -> AppServices:
    return AppServices(
        storage=storage,
        car_service=CarService(storage),
        rental_request_service=RentalRequestService(storage),
    )
