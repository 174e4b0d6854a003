"""Custom exceptions for the invoicing service."""

from __future__ import annotations

from invoicing.core.enums import ErrorKind


class InvoicingException(Exception):
    """Base exception for the invoicing service."""

    pass


class ConfigurationError(InvoicingException):
    """Raised when configuration is invalid."""

    pass


class InvoiceEngineError(InvoicingException):
    """Business-rule failure raised by the invoice engine.

    Every engine error is tagged with an ``ErrorKind`` so the API layer can
    map it to a status code without inspecting the concrete class.
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class InvoiceNotFoundError(InvoiceEngineError):
    """Raised when an invoice (or any invoice at all) does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidAmountError(InvoiceEngineError):
    """Raised when an invoice is created with a non-positive amount."""

    kind = ErrorKind.INVALID_AMOUNT


class InvalidInputError(InvoiceEngineError):
    """Raised when overdue processing receives out-of-range values."""

    kind = ErrorKind.INVALID_INPUT


class PaymentRejectedError(InvoiceEngineError):
    """Raised when a payment breaks a business rule."""

    kind = ErrorKind.PAYMENT_REJECTED
