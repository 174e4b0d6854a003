"""Invoice storage backends."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import replace

from invoicing.models.invoice import Invoice

logger = logging.getLogger(__name__)


class InvoiceStore(ABC):
    """Storage contract the invoice engine depends on."""

    @abstractmethod
    def create(self, invoice: Invoice) -> Invoice:
        """Assign the next id to ``invoice``, store it and return it."""

    @abstractmethod
    def update(self, invoice: Invoice) -> None:
        """Overwrite the stored record with the same id. No-op when missing."""

    @abstractmethod
    def get_by_id(self, invoice_id: int) -> Invoice | None:
        ...

    @abstractmethod
    def get_all(self) -> list[Invoice]:
        """Return every invoice in insertion order."""

    def count(self) -> int:
        return len(self.get_all())


class InMemoryInvoiceStore(InvoiceStore):
    """Process-local store backed by a list.

    Reads hand out copies, so stored state only changes through ``create``
    and ``update``.
    """

    def __init__(self) -> None:
        self._invoices: list[Invoice] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, invoice: Invoice) -> Invoice:
        with self._lock:
            stored = replace(invoice, invoice_id=self._next_id)
            self._next_id += 1
            self._invoices.append(stored)
            return replace(stored)

    def update(self, invoice: Invoice) -> None:
        with self._lock:
            existing = self._find(invoice.invoice_id)
            if existing is None:
                logger.debug(
                    "store.update.missing",
                    extra={"event": "store.update.missing", "invoice_id": invoice.invoice_id},
                )
                return
            existing.amount = invoice.amount
            existing.is_paid = invoice.is_paid
            existing.due_date = invoice.due_date
            existing.status = invoice.status
            existing.late_fee = invoice.late_fee
            existing.overdue_days = invoice.overdue_days
            existing.paid_amount = invoice.paid_amount

    def get_by_id(self, invoice_id: int) -> Invoice | None:
        with self._lock:
            existing = self._find(invoice_id)
            return replace(existing) if existing is not None else None

    def get_all(self) -> list[Invoice]:
        with self._lock:
            return [replace(invoice) for invoice in self._invoices]

    def count(self) -> int:
        with self._lock:
            return len(self._invoices)

    def _find(self, invoice_id: int | None) -> Invoice | None:
        return next((row for row in self._invoices if row.invoice_id == invoice_id), None)
