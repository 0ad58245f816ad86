from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from roombook.infrastructure.database import SessionLocal
from roombook.schemas.models import ReservationIn, ReservationOut
from roombook.services.reservation_service import (
    approve_reservation_service,
    cancel_reservation_service,
    create_reservation_service,
    get_reservation_service,
    list_reservations_service,
    update_reservation_service,
)

router = APIRouter(prefix="/reservations")


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@router.get("/{reservation_id}", response_model=ReservationOut)
def get_reservation_by_id(reservation_id: int, db: Session = Depends(get_db)) -> ReservationOut:
    """
    Get a single reservation (404 if missing)
    """
    return get_reservation_service(reservation_id, db)


@router.get("", response_model=list[ReservationOut])
def get_all_reservations(db: Session = Depends(get_db)) -> list[ReservationOut]:
    return list_reservations_service(db)


@router.post("", response_model=ReservationOut, status_code=201)
def create_reservation(body: ReservationIn, db: Session = Depends(get_db)) -> ReservationOut:
    """
    Create a reservation in PENDING status

    Returns:
      - 201 with the stored reservation
      - 400 if status is supplied or end is not after start
    """
    return create_reservation_service(body, db)


@router.put("/{reservation_id}", response_model=ReservationOut)
def update_reservation(reservation_id: int, body: ReservationIn, db: Session = Depends(get_db)) -> ReservationOut:
    """
    Replace the fields of a PENDING reservation
    """
    return update_reservation_service(reservation_id, body, db)


@router.post("/{reservation_id}/cancel", response_model=None)
def cancel_reservation(reservation_id: int, db: Session = Depends(get_db)) -> Response:
    cancel_reservation_service(reservation_id, db)
    return Response(status_code=200)


@router.post("/{reservation_id}/approve", response_model=ReservationOut)
def approve_reservation(reservation_id: int, db: Session = Depends(get_db)) -> ReservationOut:
    """
    Approve a PENDING reservation

    Returns:
      - 200 with the approved reservation
      - 400 if not PENDING or it conflicts with other reservations
      - 404 if missing
    """
    return approve_reservation_service(reservation_id, db)
