"""Process-wide invoice store wiring."""

from __future__ import annotations

from invoicing.database.store import InMemoryInvoiceStore, InvoiceStore

_store: InvoiceStore = InMemoryInvoiceStore()


def get_store() -> InvoiceStore:
    """Return the store shared by every request in this process."""
    return _store

