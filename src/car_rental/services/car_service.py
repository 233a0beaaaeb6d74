"""Car service for the public car operations."""

from __future__ import annotations

import dataclasses

from car_rental.domain.models import Car
from car_rental.logging_config import get_logger
from car_rental.services.errors import NotFoundError
from car_rental.services.validation import (
    require_bool,
    require_text,
    require_u32,
    require_u64,
)
from car_rental.storage import Storage


def _not_found(car_id: int) -> NotFoundError:
    return NotFoundError(f"Car with id={car_id} not found")


class CarService:
    """Create, read, update and delete cars."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage
        self._repo = storage.cars
        self._logger = get_logger(self.__class__.__name__)

    def add_car(self, make: str, model: str, year: int) -> Car:
        make = require_text(make, "make")
        model = require_text(model, "model")
        year = require_u32(year, "year")
        car = Car(
            id=self._storage.car_ids.next(),
            make=make,
            model=model,
            year=year,
            available=True,
        )
        self._repo.insert(car)
        self._logger.info("Added car id=%s", car.id)
        return car

    def update_car(self, car_id: int, make: str, model: str, year: int) -> Car:
        """Replace make, model and year; ``available`` is kept."""
        car_id = require_u64(car_id, "id")
        make = require_text(make, "make")
        model = require_text(model, "model")
        year = require_u32(year, "year")
        current = self._repo.get(car_id)
        if current is None:
            raise _not_found(car_id)
        updated = self._repo.update(
            car_id, dataclasses.replace(current, make=make, model=model, year=year)
        )
        if updated is None:
            raise _not_found(car_id)
        return updated

    def set_car_availability(self, car_id: int, available: bool) -> Car:
        car_id = require_u64(car_id, "id")
        available = require_bool(available, "available")
        current = self._repo.get(car_id)
        if current is None:
            raise _not_found(car_id)
        updated = self._repo.update(
            car_id, dataclasses.replace(current, available=available)
        )
        if updated is None:
            raise _not_found(car_id)
        return updated

    def delete_car(self, car_id: int) -> bool:
        """Remove a car. Rental requests naming it are left in place."""
        car_id = require_u64(car_id, "id")
        if not self._repo.delete(car_id):
            raise _not_found(car_id)
        self._logger.info("Deleted car id=%s", car_id)
        return True

    def get_car(self, car_id: int) -> Car:
        car_id = require_u64(car_id, "id")
        car = self._repo.get(car_id)
        if car is None:
            raise _not_found(car_id)
        return car

    def list_cars(self) -> list[Car]:
        return self._repo.list_all()
