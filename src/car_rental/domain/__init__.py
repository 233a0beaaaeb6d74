"""Domain models for CarRental."""

from car_rental.domain.models import Car, RentalRequest, RentalStatus

__all__ = [
    "Car",
    "RentalRequest",
    "RentalStatus",
]
