"""Invoice endpoints for API v1."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from invoicing.api.v1._errors import engine_error_response, message_response
from invoicing.core.dependencies import get_invoice_service
from invoicing.core.exceptions import InvoiceEngineError
from invoicing.schemas.common import MessageResponse
from invoicing.schemas.invoices import (
    InvoiceCreatedResponse,
    InvoiceCreateRequest,
    InvoiceResponse,
    OverdueProcessingRequest,
    PaymentRequest,
)
from invoicing.services.invoice_service import InvoiceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/invoices", tags=["invoices"])

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}


def _unexpected(event: str, message: str):
    logger.exception(event, extra={"event": event})
    return message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


@router.get("", response_model=list[InvoiceResponse], responses=_ERROR_RESPONSES)
def get_all_invoices(service: InvoiceService = Depends(get_invoice_service)):
    try:
        return service.list_invoices()
    except InvoiceEngineError as exc:
        return engine_error_response(exc)
    except Exception:
        return _unexpected("api.invoices.list_failed", "An error occurred while retrieving invoices.")


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=InvoiceCreatedResponse,
    responses=_ERROR_RESPONSES,
)
def create_invoice(
    payload: InvoiceCreateRequest,
    service: InvoiceService = Depends(get_invoice_service),
):
    try:
        invoice = service.create_invoice(amount=payload.amount, due_date=payload.due_date)
    except InvoiceEngineError as exc:
        return engine_error_response(exc)
    except Exception:
        return _unexpected("api.invoices.create_failed", "An error occurred while creating the invoice.")

    return InvoiceCreatedResponse(invoice_id=invoice.invoice_id)


@router.post(
    "/process-overdue",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def process_overdue_invoices(
    payload: OverdueProcessingRequest,
    service: InvoiceService = Depends(get_invoice_service),
):
    try:
        service.process_overdue_invoices(late_fee=payload.late_fee, overdue_days=payload.overdue_days)
    except InvoiceEngineError as exc:
        return engine_error_response(exc)
    except Exception:
        return _unexpected(
            "api.invoices.process_overdue_failed",
            "An error occurred while processing overdue invoices.",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{invoice_id}/pay",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
)
def pay_invoice(
    invoice_id: int,
    payload: PaymentRequest,
    service: InvoiceService = Depends(get_invoice_service),
):
    try:
        service.pay_invoice(invoice_id=invoice_id, payment_amount=payload.payment_amount)
    except InvoiceEngineError as exc:
        return engine_error_response(exc)
    except Exception:
        return _unexpected("api.invoices.pay_failed", "An error occurred while processing the payment.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
