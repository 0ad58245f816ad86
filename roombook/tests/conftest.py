from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy.orm import Session, sessionmaker
from starlette.testclient import TestClient

from roombook.core.use_cases.reservation_engine import ReservationEngine
from roombook.infrastructure.database import Base, build_engine
from roombook.infrastructure.database import engine as app_engine
from roombook.main import app
from roombook.tests.fakes import InMemoryReservationRepository


@pytest.fixture()
def repo() -> InMemoryReservationRepository:
    return InMemoryReservationRepository()


@pytest.fixture()
def engine(repo: InMemoryReservationRepository) -> ReservationEngine:
    return ReservationEngine(reservation_repo=repo)


@pytest.fixture()
def strict_engine(repo: InMemoryReservationRepository) -> ReservationEngine:
    return ReservationEngine(reservation_repo=repo, strict_conflicts=True)


@pytest.fixture()
def db_session() -> Iterator[Session]:
    """
    A private in-memory SQLite database per test.
    """
    sql_engine = build_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(bind=sql_engine)
    session = sessionmaker(bind=sql_engine)()
    try:
        yield session
    finally:
        session.close()
        sql_engine.dispose()


@pytest.fixture()
def client() -> TestClient:
    """
    TestClient on the real app, with the reservations table emptied first.
    """
    Base.metadata.drop_all(bind=app_engine)
    Base.metadata.create_all(bind=app_engine)
    return TestClient(app)
