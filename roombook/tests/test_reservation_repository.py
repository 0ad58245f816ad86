from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from roombook.core.entities.reservation import ReservationStatus
from roombook.core.use_cases.reservation_engine import ReservationEngine
from roombook.infrastructure.repositories.reservation_repository_impl import ReservationRepositoryImpl
from roombook.tests.fakes import make_reservation


def test_save_without_id_assigns_new_ids(db_session: Session) -> None:
    repo = ReservationRepositoryImpl(db_session)

    first = repo.save(make_reservation(date(2024, 1, 1), date(2024, 1, 2), status=ReservationStatus.PENDING))
    second = repo.save(make_reservation(date(2024, 1, 3), date(2024, 1, 4), status=ReservationStatus.PENDING))

    assert first.id is not None and second.id is not None
    assert first.id != second.id
    assert repo.get(first.id) == first


def test_save_with_id_overwrites_existing_row(db_session: Session) -> None:
    repo = ReservationRepositoryImpl(db_session)
    saved = repo.save(make_reservation(date(2024, 1, 1), date(2024, 1, 2), status=ReservationStatus.PENDING))

    saved.room_id = 8
    saved.end = date(2024, 1, 9)
    repo.save(saved)

    stored = repo.get(saved.id)
    assert stored.room_id == 8
    assert stored.end == date(2024, 1, 9)
    assert len(repo.list()) == 1


def test_get_and_exists_for_missing_id(db_session: Session) -> None:
    repo = ReservationRepositoryImpl(db_session)

    assert repo.get(123) is None
    assert repo.exists(123) is False


def test_list_returns_all_rows(db_session: Session) -> None:
    repo = ReservationRepositoryImpl(db_session)
    assert repo.list() == []

    for day in (1, 5, 9):
        repo.save(make_reservation(date(2024, 1, day), date(2024, 1, day + 1), status=ReservationStatus.PENDING))

    assert [r.start.day for r in repo.list()] == [1, 5, 9]


def test_set_status_updates_only_status(db_session: Session) -> None:
    repo = ReservationRepositoryImpl(db_session)
    saved = repo.save(make_reservation(date(2024, 1, 1), date(2024, 1, 2), status=ReservationStatus.PENDING))

    assert repo.set_status(saved.id, ReservationStatus.CANCELLED) is True

    stored = repo.get(saved.id)
    assert stored.status is ReservationStatus.CANCELLED
    assert (stored.start, stored.end, stored.room_id) == (saved.start, saved.end, saved.room_id)
    assert repo.exists(saved.id) is True


def test_set_status_on_missing_id_returns_false(db_session: Session) -> None:
    repo = ReservationRepositoryImpl(db_session)
    assert repo.set_status(77, ReservationStatus.CANCELLED) is False


def test_engine_lifecycle_against_sql_store(db_session: Session) -> None:
    engine = ReservationEngine(reservation_repo=ReservationRepositoryImpl(db_session))

    a = engine.create(make_reservation(date(2024, 1, 1), date(2024, 1, 5)))
    b = engine.create(make_reservation(date(2024, 2, 1), date(2024, 2, 5)))

    engine.cancel(a.id)
    approved = engine.approve(b.id)

    assert engine.get_by_id(a.id).status is ReservationStatus.CANCELLED
    assert approved.status is ReservationStatus.APPROVED
    assert {r.status for r in engine.list_all()} == {ReservationStatus.CANCELLED, ReservationStatus.APPROVED}
