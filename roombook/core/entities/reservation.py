from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class ReservationStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    CANCELLED = "CANCELLED"


class ReservationAction(str, Enum):
    UPDATE = "update"
    CANCEL = "cancel"
    APPROVE = "approve"


# action -> (statuses it may start from, status it leaves behind)
TRANSITIONS: dict[ReservationAction, tuple[frozenset[ReservationStatus], ReservationStatus]] = {
    ReservationAction.UPDATE: (frozenset({ReservationStatus.PENDING}), ReservationStatus.PENDING),
    ReservationAction.CANCEL: (frozenset({ReservationStatus.PENDING}), ReservationStatus.CANCELLED),
    ReservationAction.APPROVE: (frozenset({ReservationStatus.PENDING}), ReservationStatus.APPROVED),
}

TERMINAL_STATUSES = frozenset({ReservationStatus.APPROVED, ReservationStatus.CANCELLED})


def can_transition(action: ReservationAction, current: ReservationStatus | None) -> bool:
    allowed_from, _ = TRANSITIONS[action]
    return current in allowed_from


def target_status(action: ReservationAction) -> ReservationStatus:
    _, target = TRANSITIONS[action]
    return target


@dataclass(slots=True)
class Reservation:
    user_id: int
    room_id: int
    start: date
    end: date
    status: ReservationStatus | None = None
    id: int | None = None

    def has_valid_range(self) -> bool:
        return self.end > self.start

    def conflicts_with(self, found: Reservation) -> bool:
        """
        True if `found` collides with this reservation's date range.

        A shared start or a shared end always collides. Ranges that only touch
        (found.end == self.start) do not.
        """
        return (
            (self.start < found.end < self.end)
            or (self.start < found.start < self.end)
            or (found.start < self.start and found.end > self.end)
            or found.start == self.start
            or found.end == self.end
        )
