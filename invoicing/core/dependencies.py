"""Dependency providers for API handlers."""

from __future__ import annotations

from fastapi import Depends

from invoicing.core.config import Config, get_config
from invoicing.database.db import get_store
from invoicing.database.store import InvoiceStore
from invoicing.services.invoice_service import InvoiceService


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_invoice_store() -> InvoiceStore:
    """Return the process-wide invoice store."""
    return get_store()


def get_invoice_service(store: InvoiceStore = Depends(get_invoice_store)) -> InvoiceService:
    """Create an invoice service bound to the shared store for this request."""
    return InvoiceService(store=store)
