from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext
from dataclasses import replace
from typing import Protocol

from loguru import logger

from roombook.core.entities.reservation import (
    Reservation,
    ReservationAction,
    ReservationStatus,
    can_transition,
    target_status,
)
from roombook.core.exceptions import InvalidInputError, InvalidStateError, NotFoundError
from roombook.core.repositories.reservation_repository import ReservationRepository


class ApprovalLocks(Protocol):
    """
    Hands out a lock per room so approvals for the same room run one at a time.
    """

    def for_room(self, room_id: int) -> AbstractContextManager:
        raise NotImplementedError


class ReservationEngine:
    """
    Lifecycle and conflict rules for reservations.

    Holds no state of its own; every read and write goes through the injected repository.
    """

    def __init__(
            self,
            *,
            reservation_repo: ReservationRepository,
            strict_conflicts: bool = False,
            approval_locks: ApprovalLocks | None = None,
    ) -> None:
        self._reservation_repo = reservation_repo
        self._strict_conflicts = strict_conflicts
        self._approval_locks = approval_locks

    def get_by_id(self, reservation_id: int) -> Reservation:
        reservation = self._reservation_repo.get(reservation_id)
        if reservation is None:
            raise NotFoundError(reservation_id)
        return reservation

    def list_all(self) -> list[Reservation]:
        return self._reservation_repo.list()

    def create(self, reservation: Reservation) -> Reservation:
        logger.debug("create() called, room_id: {}", reservation.room_id)
        if reservation.status is not None:
            raise InvalidInputError("Reservation status must be empty.")
        self._require_valid_range(reservation)

        saved = self._reservation_repo.save(
            replace(reservation, id=None, status=ReservationStatus.PENDING)
        )
        logger.info("Reservation {} created for room {}", saved.id, saved.room_id)
        return saved

    def update(self, reservation_id: int, reservation: Reservation) -> Reservation:
        logger.debug("update() called, id: {}", reservation_id)
        existing = self.get_by_id(reservation_id)
        self._require_transition(ReservationAction.UPDATE, existing, "modified")
        self._require_valid_range(reservation)

        updated = self._reservation_repo.save(
            Reservation(
                id=existing.id,
                user_id=reservation.user_id,
                room_id=reservation.room_id,
                start=reservation.start,
                end=reservation.end,
                status=target_status(ReservationAction.UPDATE),
            )
        )
        logger.info("Reservation {} updated", updated.id)
        return updated

    def cancel(self, reservation_id: int) -> None:
        logger.info("cancel() called, id: {}", reservation_id)
        existing = self.get_by_id(reservation_id)
        self._require_transition(ReservationAction.CANCEL, existing, "cancelled")

        if not self._reservation_repo.set_status(reservation_id, target_status(ReservationAction.CANCEL)):
            raise NotFoundError(reservation_id)
        logger.info("Reservation with id {} successfully cancelled.", reservation_id)

    def approve(self, reservation_id: int) -> Reservation:
        logger.debug("approve() called, id: {}", reservation_id)
        candidate = self.get_by_id(reservation_id)

        with self._lock_for(candidate.room_id):
            # status may have changed while waiting for the lock
            candidate = self.get_by_id(reservation_id)
            self._require_transition(ReservationAction.APPROVE, candidate, "approved")

            if self.has_conflicts(candidate):
                logger.warning("Reservation {} rejected: conflicts with other reservations", reservation_id)
                raise InvalidStateError(
                    "Reservation cannot be approved. It has conflicts with other reservations."
                )

            candidate.status = target_status(ReservationAction.APPROVE)
            approved = self._reservation_repo.save(candidate)

        logger.info("Reservation {} approved for room {}", approved.id, approved.room_id)
        return approved

    def has_conflicts(self, candidate: Reservation) -> bool:
        return any(candidate.conflicts_with(found) for found in self._conflict_candidates(candidate))

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _conflict_candidates(self, candidate: Reservation) -> list[Reservation]:
        others = [r for r in self._reservation_repo.list() if r.id != candidate.id]
        if not self._strict_conflicts:
            return others
        return [
            r for r in others
            if r.room_id == candidate.room_id and r.status is ReservationStatus.APPROVED
        ]

    def _lock_for(self, room_id: int) -> AbstractContextManager:
        if self._approval_locks is None:
            return nullcontext()
        return self._approval_locks.for_room(room_id)

    @staticmethod
    def _require_valid_range(reservation: Reservation) -> None:
        if not reservation.has_valid_range():
            raise InvalidInputError(
                f"Reservation end date must be after start date (start={reservation.start}, "
                f"end={reservation.end})."
            )

    @staticmethod
    def _require_transition(action: ReservationAction, reservation: Reservation, verb: str) -> None:
        if not can_transition(action, reservation.status):
            status = reservation.status.value if reservation.status is not None else None
            raise InvalidStateError(
                f"Reservation cannot be {verb}. Status must be PENDING, but found {status}"
            )
