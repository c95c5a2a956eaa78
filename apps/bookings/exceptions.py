"""Typed failures raised by the booking services.

Views turn every one of them into ``{"success": False, "message": ...}``.
"""

from __future__ import annotations


class BookingError(Exception):
    """Base class for booking failures that carry a client-facing message."""

    default_message = "Booking request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class BookingValidationError(BookingError):
    """Malformed or missing request input."""

    default_message = "Invalid request data"


class BookingConflictError(BookingError):
    """Raised when a car is busy for the requested dates."""

    default_message = "Car is not available for the selected dates"


class UnauthorizedError(BookingError):
    """Role or ownership mismatch."""

    default_message = "Unauthorized"


class NotFoundError(BookingError):
    default_message = "Not found"


class StorageError(BookingError):
    """The database failed underneath a booking operation."""

    default_message = "Storage error"
