"""
Custom exception classes for bookkeeping_client.

Decode failures are split into two layers: the payload could not be read at
all (bad JSON, wrong top-level shape, unsupported file) or it was read but
does not describe a valid user.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError


class BookkeepingClientException(Exception):
    """Base exception class for all bookkeeping_client exceptions."""

    pass


class PayloadDecodeError(BookkeepingClientException):
    """
    Raised when a payload cannot be decoded into users.

    Example:
        >>> raise PayloadDecodeError(
        ...     reason="invalid JSON",
        ...     details={"line": 1, "column": 5}
        ... )
    """

    def __init__(self, reason: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.details = details or {}
        message = f"{reason}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)


class UserValidationError(PayloadDecodeError):
    """
    Raised when a decoded payload does not describe a valid user.

    ``errors`` holds one ``{"loc": ..., "msg": ...}`` entry per failure, where
    ``loc`` is the dotted wire location (e.g. ``"0.externalId"`` for the first
    element of an array).
    """

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__(
            reason="invalid user payload",
            details={"errors": errors},
        )

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "UserValidationError":
        errors = [
            {
                "loc": ".".join(str(part) for part in err["loc"]) or "<root>",
                "msg": err["msg"],
            }
            for err in exc.errors()
        ]
        return cls(errors)
