from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from roombook.core.entities.reservation import Reservation, ReservationStatus
from roombook.core.repositories.reservation_repository import ReservationRepository
from roombook.infrastructure.models.models import ReservationModel


class ReservationRepositoryImpl(ReservationRepository):
    """
    SQLAlchemy implementation of the reservation store. Every write commits on its own.
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def get(self, reservation_id: int) -> Reservation | None:
        row = self._db.get(ReservationModel, reservation_id)
        if row is None:
            return None
        return self._to_entity(row)

    def list(self) -> list[Reservation]:
        rows = self._db.scalars(select(ReservationModel).order_by(ReservationModel.id)).all()
        return [self._to_entity(row) for row in rows]

    def save(self, reservation: Reservation) -> Reservation:
        row = None
        if reservation.id is not None:
            row = self._db.get(ReservationModel, reservation.id)
        if row is None:
            row = ReservationModel(id=reservation.id)

        row.user_id = reservation.user_id
        row.room_id = reservation.room_id
        row.start_date = reservation.start
        row.end_date = reservation.end
        row.status = reservation.status

        self._db.add(row)
        self._db.commit()
        self._db.refresh(row)
        return self._to_entity(row)

    def set_status(self, reservation_id: int, status: ReservationStatus) -> bool:
        result = self._db.execute(
            update(ReservationModel)
            .where(ReservationModel.id == reservation_id)
            .values(status=status)
        )
        self._db.commit()
        # keep already-loaded rows in this session from serving the old status
        self._db.expire_all()
        return result.rowcount > 0

    def exists(self, reservation_id: int) -> bool:
        found = self._db.scalar(select(ReservationModel.id).where(ReservationModel.id == reservation_id))
        return found is not None

    @staticmethod
    def _to_entity(row: ReservationModel) -> Reservation:
        return Reservation(
            id=row.id,
            user_id=row.user_id,
            room_id=row.room_id,
            start=row.start_date,
            end=row.end_date,
            status=ReservationStatus(row.status) if not isinstance(row.status, ReservationStatus) else row.status,
        )
