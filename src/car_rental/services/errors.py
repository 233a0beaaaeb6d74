"""Custom service layer errors."""

from __future__ import annotations


class ServiceError(Exception):
    """Base error for service-layer failures."""

    kind = "ServiceError"

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {self.kind: {"msg": self.msg}}


class InvalidInputError(ServiceError):
    """Raised when caller-supplied data fails validation."""

    kind = "InvalidInput"


class NotFoundError(ServiceError):
    """Raised when an entity is not found."""

    kind = "NotFound"
