from __future__ import annotations

from sqlalchemy.orm import Session

from roombook.core.entities.reservation import Reservation, ReservationStatus
from roombook.core.use_cases.reservation_engine import ReservationEngine
from roombook.infrastructure.locks import room_locks
from roombook.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from roombook.schemas.models import ReservationIn, ReservationOut, Status


def _settings():
    from roombook.infrastructure.config import settings
    return settings


def _build_engine(db: Session) -> ReservationEngine:
    settings = _settings()
    return ReservationEngine(
        reservation_repo=ReservationRepositoryImpl(db),
        strict_conflicts=settings.strict_conflict_check,
        approval_locks=room_locks if settings.serialize_approvals else None,
    )


def _to_core_reservation(body: ReservationIn) -> Reservation:
    """
    Translate API schema ReservationIn -> core Reservation entity.
    """
    return Reservation(
        id=body.id,
        user_id=body.user_id,
        room_id=body.room_id,
        start=body.start,
        end=body.end,
        status=ReservationStatus(body.status.value) if body.status is not None else None,
    )


def _to_schema(reservation: Reservation) -> ReservationOut:
    return ReservationOut(
        id=reservation.id,
        user_id=reservation.user_id,
        room_id=reservation.room_id,
        start=reservation.start,
        end=reservation.end,
        status=Status(reservation.status.value),
    )


def get_reservation_service(reservation_id: int, db: Session) -> ReservationOut:
    return _to_schema(_build_engine(db).get_by_id(reservation_id))


def list_reservations_service(db: Session) -> list[ReservationOut]:
    return [_to_schema(r) for r in _build_engine(db).list_all()]


def create_reservation_service(body: ReservationIn, db: Session) -> ReservationOut:
    return _to_schema(_build_engine(db).create(_to_core_reservation(body)))


def update_reservation_service(reservation_id: int, body: ReservationIn, db: Session) -> ReservationOut:
    return _to_schema(_build_engine(db).update(reservation_id, _to_core_reservation(body)))


def cancel_reservation_service(reservation_id: int, db: Session) -> None:
    _build_engine(db).cancel(reservation_id)


def approve_reservation_service(reservation_id: int, db: Session) -> ReservationOut:
    return _to_schema(_build_engine(db).approve(reservation_id))
