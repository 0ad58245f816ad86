from __future__ import annotations

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class Status(Enum):
    PENDING = 'PENDING'
    APPROVED = 'APPROVED'
    CANCELLED = 'CANCELLED'


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReservationIn(_CamelModel):
    """
    Request body for POST /reservations and PUT /reservations/{id}.

    id and status are accepted so the engine can reject or ignore them explicitly.
    """
    id: int | None = None
    user_id: int
    room_id: int
    start: date
    end: date
    status: Status | None = None

    @field_validator('start', 'end')
    @classmethod
    def _future_or_present(cls, value: date) -> date:
        if value < date.today():
            raise ValueError('must be a date in the present or in the future')
        return value


class ReservationOut(_CamelModel):
    id: int
    user_id: int
    room_id: int
    start: date
    end: date
    status: Status


class ErrorResponse(_CamelModel):
    message: str
    detailed_message: str
    error_time: datetime
