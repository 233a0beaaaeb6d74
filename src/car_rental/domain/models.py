"""Domain dataclasses and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RentalStatus(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


@dataclass(frozen=True, slots=True)
class Car:
    id: int
    make: str
    model: str
    year: int
    available: bool = True


@dataclass(frozen=True, slots=True)
class RentalRequest:
    """A customer's request to rent a car between two epoch instants.

    ``car_id`` is not checked against stored cars and may outlive the car
    it names.
    """

    id: int
    car_id: int
    customer_id: int
    start_date: int
    end_date: int
    status: RentalStatus
