from __future__ import annotations

from datetime import date

from sqlalchemy import Date, Enum, Integer
from sqlalchemy.orm import Mapped, mapped_column

from roombook.core.entities.reservation import ReservationStatus
from roombook.infrastructure.database import Base


class ReservationModel(Base):
    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    room_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[ReservationStatus] = mapped_column(Enum(ReservationStatus), nullable=False)
