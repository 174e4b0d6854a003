"""Invoice request/response schemas for API contracts."""

from __future__ import annotations

from datetime import datetime

from invoicing.schemas.common import CamelModel, Money


class InvoiceCreateRequest(CamelModel):
    # Range checks live in the engine so callers get its error messages.
    amount: Money
    due_date: datetime


class InvoiceCreatedResponse(CamelModel):
    message: str = "Invoice created successfully."
    invoice_id: int


class PaymentRequest(CamelModel):
    payment_amount: Money


class OverdueProcessingRequest(CamelModel):
    late_fee: Money
    overdue_days: int


class InvoiceResponse(CamelModel):
    invoice_id: int
    amount: Money
    paid_amount: Money
    due_date: str
    status: str
