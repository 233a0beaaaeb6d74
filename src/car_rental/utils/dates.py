"""Conversion of user-entered dates to epoch seconds."""

from __future__ import annotations

import re
from datetime import datetime

from dateutil import parser, tz

from car_rental.services.errors import InvalidInputError

_EPOCH_PATTERN = re.compile(r"^[+-]?\d+$")


def to_epoch_seconds(value: str | int | datetime) -> int:
    """Return ``value`` as whole seconds since the Unix epoch.

    Integer strings, signed or not, are taken as epoch seconds already; range
    checks are left to the caller. Other strings go through ``dateutil``;
    naive datetimes are read as UTC.
    """
    if isinstance(value, bool):
        raise InvalidInputError(f"Invalid date: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if _EPOCH_PATTERN.match(text):
            return int(text)
        try:
            parsed = parser.parse(text)
        except (ValueError, OverflowError) as exc:
            raise InvalidInputError(f"Invalid date: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return int(parsed.timestamp())
