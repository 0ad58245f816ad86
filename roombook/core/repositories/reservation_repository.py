from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.core.entities.reservation import Reservation, ReservationStatus


class ReservationRepository(ABC):
    """
    Keyed persistence for reservations. Holds no transition rules.
    """

    @abstractmethod
    def get(self, reservation_id: int) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def save(self, reservation: Reservation) -> Reservation:
        """Insert when reservation.id is None (assigning a new id), otherwise overwrite that row."""
        raise NotImplementedError

    @abstractmethod
    def set_status(self, reservation_id: int, status: ReservationStatus) -> bool:
        """Update only the status column. Returns False if no row has that id."""
        raise NotImplementedError

    @abstractmethod
    def exists(self, reservation_id: int) -> bool:
        raise NotImplementedError
