"""Input checks shared by the services."""

from __future__ import annotations

from typing import Any

from car_rental.domain.models import RentalStatus
from car_rental.services.errors import InvalidInputError

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1


def require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{field} must be a non-empty string")
    return value


def _require_unsigned(value: Any, field: str, maximum: int, label: str) -> int:
    # bool is an int subclass but never a valid number here.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{field} must be an integer")
    if value < 0 or value > maximum:
        raise InvalidInputError(f"{field} must fit in an unsigned {label} integer")
    return value


def require_u32(value: Any, field: str) -> int:
    return _require_unsigned(value, field, U32_MAX, "32-bit")


def require_u64(value: Any, field: str) -> int:
    return _require_unsigned(value, field, U64_MAX, "64-bit")


def require_bool(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidInputError(f"{field} must be a boolean")
    return value


def parse_status(value: Any) -> RentalStatus:
    """Accept a RentalStatus, or its name or value in any letter case."""
    if isinstance(value, RentalStatus):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for status in RentalStatus:
            if wanted in (status.value.lower(), status.name.lower()):
                return status
    choices = ", ".join(status.value for status in RentalStatus)
    raise InvalidInputError(f"status must be one of: {choices}")
