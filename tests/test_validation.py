"""Tests for input validation and error payloads."""

import pytest

from car_rental.domain.models import RentalStatus
from car_rental.services.errors import InvalidInputError, NotFoundError, ServiceError
from car_rental.services.validation import (
    U32_MAX,
    U64_MAX,
    parse_status,
    require_text,
    require_u32,
    require_u64,
)


class TestNumbers:
    """Tests for unsigned range checks."""

    def test_bounds_accepted(self):
        assert require_u32(0, "year") == 0
        assert require_u32(U32_MAX, "year") == U32_MAX
        assert require_u64(U64_MAX, "id") == U64_MAX

    @pytest.mark.parametrize("value", [-1, U64_MAX + 1, 1.0, None, False])
    def test_rejected(self, value):
        with pytest.raises(InvalidInputError):
            require_u64(value, "id")


class TestText:
    """Tests for require_text."""

    def test_value_returned_unchanged(self):
        assert require_text(" Corolla ", "model") == " Corolla "

    @pytest.mark.parametrize("value", ["", "  \t", None, 5])
    def test_rejected(self, value):
        with pytest.raises(InvalidInputError) as excinfo:
            require_text(value, "make")
        assert "make" in excinfo.value.msg


class TestParseStatus:
    """Tests for parse_status."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (RentalStatus.ACTIVE, RentalStatus.ACTIVE),
            ("Completed", RentalStatus.COMPLETED),
            ("pending", RentalStatus.PENDING),
            (" CANCELED ", RentalStatus.CANCELED),
        ],
    )
    def test_accepted(self, raw, expected):
        assert parse_status(raw) is expected

    def test_rejected(self):
        with pytest.raises(InvalidInputError) as excinfo:
            parse_status("Returned")
        assert "Pending" in excinfo.value.msg


class TestErrors:
    """Tests for the error payloads."""

    def test_kinds(self):
        assert InvalidInputError("bad").to_dict() == {"InvalidInput": {"msg": "bad"}}
        assert NotFoundError("gone").to_dict() == {"NotFound": {"msg": "gone"}}

    def test_common_base(self):
        assert issubclass(InvalidInputError, ServiceError)
        assert issubclass(NotFoundError, ServiceError)
        assert str(NotFoundError("gone")) == "gone"
