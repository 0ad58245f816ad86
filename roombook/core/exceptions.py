"""
Errors raised by the reservation engine.

Each error carries an ErrorKind so the HTTP layer can pick a status code without
inspecting messages.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_STATE = "INVALID_STATE"


class ReservationError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ReservationError):
    """Raise to map to HTTP 404."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, reservation_id: int) -> None:
        self.reservation_id = reservation_id
        super().__init__(f"Reservation with id {reservation_id} not found.")


class InvalidInputError(ReservationError):
    """Raise to map to HTTP 400 (caller supplied a forbidden or malformed field)."""

    kind = ErrorKind.INVALID_INPUT


class InvalidStateError(ReservationError):
    """Raise to map to HTTP 400 (operation not legal for the current status)."""

    kind = ErrorKind.INVALID_STATE
