"""Pydantic schema package for API contracts."""

from invoicing.schemas.common import CamelModel, MessageResponse, Money
from invoicing.schemas.invoices import (
    InvoiceCreatedResponse,
    InvoiceCreateRequest,
    InvoiceResponse,
    OverdueProcessingRequest,
    PaymentRequest,
)

__all__ = [
    "CamelModel",
    "InvoiceCreateRequest",
    "InvoiceCreatedResponse",
    "InvoiceResponse",
    "MessageResponse",
    "Money",
    "OverdueProcessingRequest",
    "PaymentRequest",
]
