"""Shared error translation helpers for API v1 route modules."""

from __future__ import annotations

from fastapi import status
from fastapi.responses import JSONResponse

from invoicing.core.enums import ErrorKind
from invoicing.core.exceptions import InvoiceEngineError

INVALID_INPUT_MESSAGE = "Invalid input data."

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.PAYMENT_REJECTED: status.HTTP_400_BAD_REQUEST,
}


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def map_engine_error(exc: InvoiceEngineError) -> tuple[int, str]:
    return _STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST), exc.message


def engine_error_response(exc: InvoiceEngineError) -> JSONResponse:
    code, message = map_engine_error(exc)
    return message_response(code, message)
