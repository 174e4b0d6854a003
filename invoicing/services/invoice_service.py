"""Invoice service: creation, listing, payments and overdue processing."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal

from invoicing.core.enums import InvoiceStatus
from invoicing.core.exceptions import (
    InvalidAmountError,
    InvalidInputError,
    InvoiceNotFoundError,
    PaymentRejectedError,
)
from invoicing.models.invoice import Invoice
from invoicing.schemas.invoices import InvoiceResponse
from invoicing.services.base_service import BaseService

logger = logging.getLogger(__name__)

DUE_DATE_FORMAT = "%Y-%m-%d"


class InvoiceService(BaseService):
    """Business rules for the invoice lifecycle."""

    def create_invoice(self, amount: Decimal, due_date: datetime) -> Invoice:
        """Create a Pending invoice with nothing paid yet."""
        if amount <= 0:
            raise InvalidAmountError("Invalid Input")

        invoice = self.store.create(Invoice(amount=amount, due_date=self.to_naive_utc(due_date)))
        logger.info(
            "invoice.created",
            extra={"event": "invoice.created", "invoice_id": invoice.invoice_id, "amount": str(amount)},
        )
        return invoice

    def get_invoice(self, invoice_id: int) -> Invoice:
        invoice = self.store.get_by_id(invoice_id)
        if invoice is None:
            raise InvoiceNotFoundError(f"Invoice with ID {invoice_id} not found.")
        return invoice

    def list_invoices(self) -> list[InvoiceResponse]:
        """Project every stored invoice for the API, in store order."""
        invoices = self.store.get_all()
        if not invoices:
            raise InvoiceNotFoundError("Invoice not found.")

        return [
            InvoiceResponse(
                invoice_id=invoice.invoice_id,
                amount=invoice.amount,
                paid_amount=invoice.paid_amount,
                due_date=invoice.due_date.strftime(DUE_DATE_FORMAT),
                status=invoice.status.value,
            )
            for invoice in invoices
        ]

    def pay_invoice(self, invoice_id: int, payment_amount: Decimal) -> Invoice:
        """Record a payment against an invoice.

        The invoice becomes Paid only when the payment equals the balance
        outstanding before it; any other accepted payment leaves it Pending.
        """
        invoice = self._validate_payment(invoice_id, payment_amount)

        if invoice.balance != payment_amount:
            invoice.status = InvoiceStatus.PENDING
        else:
            invoice.status = InvoiceStatus.PAID

        invoice.is_paid = True
        invoice.paid_amount += payment_amount
        self.store.update(invoice)
        logger.info(
            "invoice.payment_recorded",
            extra={
                "event": "invoice.payment_recorded",
                "invoice_id": invoice_id,
                "payment_amount": str(payment_amount),
                "status": invoice.status.value,
            },
        )
        return invoice

    def _validate_payment(self, invoice_id: int, payment_amount: Decimal) -> Invoice:
        invoice = self.get_invoice(invoice_id)
        if invoice.is_fully_paid:
            raise PaymentRejectedError(
                f"Payment cannot be made as the Invoice with ID {invoice_id} is fully paid."
            )
        if payment_amount < 0:
            raise PaymentRejectedError("Payment amount should be greater than 0.")
        if invoice.balance < payment_amount:
            raise PaymentRejectedError("Payment amount is greater than the invoice amount.")
        return invoice

    def process_overdue_invoices(self, late_fee: Decimal, overdue_days: int) -> None:
        """Close out past-due Pending invoices and roll their balance forward.

        Each past-due invoice with a positive balance is marked Paid if it
        had received a partial payment and Void otherwise. A new Pending
        invoice for the balance plus ``late_fee`` is then created, due
        ``overdue_days`` from now.
        """
        if late_fee < 0:
            raise InvalidInputError("LateFee is Less than Zero.")
        if overdue_days < 0:
            raise InvalidInputError("OverDueDays is less than Zero. This will create backdated invoices.")

        now = self.now()
        try:
            new_due_date = now + timedelta(days=overdue_days)
        except OverflowError as exc:
            raise InvalidInputError("OverDueDays is too large. The new due date is out of range.") from exc

        overdue = [
            invoice
            for invoice in self.store.get_all()
            if invoice.due_date < now and invoice.status == InvoiceStatus.PENDING
        ]

        rolled_over = 0
        for invoice in overdue:
            balance = invoice.balance
            if balance <= 0:
                continue

            remaining = balance + late_fee
            if remaining > 0 and invoice.is_paid:
                invoice.status = InvoiceStatus.PAID
            else:
                invoice.status = InvoiceStatus.VOID
            self.store.update(invoice)

            replacement = self.store.create(Invoice(amount=remaining, due_date=new_due_date))
            rolled_over += 1
            logger.info(
                "invoice.rolled_over",
                extra={
                    "event": "invoice.rolled_over",
                    "invoice_id": invoice.invoice_id,
                    "status": invoice.status.value,
                    "new_invoice_id": replacement.invoice_id,
                    "amount": str(remaining),
                },
            )

        logger.info(
            "invoice.overdue_processed",
            extra={"event": "invoice.overdue_processed", "candidates": len(overdue), "rolled_over": rolled_over},
        )
