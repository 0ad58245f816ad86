from __future__ import annotations

from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from roombook.core.exceptions import ErrorKind, ReservationError
from roombook.schemas.models import ErrorResponse

# kind -> (HTTP status, short message)
_KIND_TO_RESPONSE: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "No Such Element"),
    ErrorKind.INVALID_INPUT: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
    ErrorKind.INVALID_STATE: (status.HTTP_400_BAD_REQUEST, "Bad Request"),
}


def _error_response(status_code: int, message: str, detailed_message: str) -> JSONResponse:
    body = ErrorResponse(message=message, detailed_message=detailed_message, error_time=datetime.now())
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
    status_code, message = _KIND_TO_RESPONSE[exc.kind]
    logger.error(f"{message}: {exc.message}")
    return _error_response(status_code, message, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.error(f"Validation error: {exc.errors()}")
    detail = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, "Bad Request", detail)


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception: {exc}")
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "General error", str(exc))


EXCEPTION_HANDLERS = {
    ReservationError: reservation_error_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
