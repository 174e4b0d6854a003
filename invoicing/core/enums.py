"""Enums for the invoicing service."""

from enum import Enum


class InvoiceStatus(Enum):
    """Lifecycle status of an invoice.

    Values are title case because the API exposes them as-is.
    """

    PENDING = "Pending"
    PAID = "Paid"
    VOID = "Void"


class ErrorKind(Enum):
    """Category of a business-rule failure raised by the engine."""

    NOT_FOUND = "not_found"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_INPUT = "invalid_input"
    PAYMENT_REJECTED = "payment_rejected"
