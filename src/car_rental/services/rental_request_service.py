"""Rental request service for the public rental operations."""

from __future__ import annotations

from car_rental.domain.models import RentalRequest, RentalStatus
from car_rental.logging_config import get_logger
from car_rental.services.errors import NotFoundError
from car_rental.services.validation import parse_status, require_u64
from car_rental.storage import Storage


def _not_found(rental_request_id: int) -> NotFoundError:
    return NotFoundError(f"Rental request with id={rental_request_id} not found")


class RentalRequestService:
    """Service for rental requests.

    Neither the referenced car nor the status transition is checked: a
    request may name a car that does not exist, and any status may replace
    any other.
    """

    def __init__(self, storage: Storage) -> None:
        self._storage = storage
        self._repo = storage.rental_requests
        self._logger = get_logger(self.__class__.__name__)

    def add_rental_request(
        self,
        car_id: int,
        customer_id: int,
        start_date: int,
        end_date: int,
        status: str | RentalStatus,
    ) -> RentalRequest:
        fields = self._validated_fields(
            car_id, customer_id, start_date, end_date, status
        )
        rental_request = RentalRequest(
            id=self._storage.rental_request_ids.next(), **fields
        )
        self._repo.insert(rental_request)
        self._logger.info(
            "Added rental request id=%s car_id=%s",
            rental_request.id,
            rental_request.car_id,
        )
        return rental_request

    def update_rental_request(
        self,
        rental_request_id: int,
        car_id: int,
        customer_id: int,
        start_date: int,
        end_date: int,
        status: str | RentalStatus,
    ) -> RentalRequest:
        rental_request_id = require_u64(rental_request_id, "id")
        fields = self._validated_fields(
            car_id, customer_id, start_date, end_date, status
        )
        updated = self._repo.update(
            rental_request_id, RentalRequest(id=rental_request_id, **fields)
        )
        if updated is None:
            raise _not_found(rental_request_id)
        return updated

    def delete_rental_request(self, rental_request_id: int) -> bool:
        rental_request_id = require_u64(rental_request_id, "id")
        if not self._repo.delete(rental_request_id):
            raise _not_found(rental_request_id)
        self._logger.info("Deleted rental request id=%s", rental_request_id)
        return True

    def get_rental_request(self, rental_request_id: int) -> RentalRequest:
        rental_request_id = require_u64(rental_request_id, "id")
        rental_request = self._repo.get(rental_request_id)
        if rental_request is None:
            raise _not_found(rental_request_id)
        return rental_request

    def list_rental_requests(self) -> list[RentalRequest]:
        return self._repo.list_all()

    def list_rental_requests_for_car(self, car_id: int) -> list[RentalRequest]:
        return self._repo.list_for_car(require_u64(car_id, "car_id"))

    def list_rental_requests_for_customer(
        self, customer_id: int
    ) -> list[RentalRequest]:
        return self._repo.list_for_customer(require_u64(customer_id, "customer_id"))

    def _validated_fields(
        self,
        car_id: int,
        customer_id: int,
        start_date: int,
        end_date: int,
        status: str | RentalStatus,
    ) -> dict[str, object]:
        return {
            "car_id": require_u64(car_id, "car_id"),
            "customer_id": require_u64(customer_id, "customer_id"),
            "start_date": require_u64(start_date, "start_date"),
            "end_date": require_u64(end_date, "end_date"),
            "status": parse_status(status),
        }
