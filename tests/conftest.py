from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from invoicing.core.dependencies import get_invoice_store
from invoicing.database.store import InMemoryInvoiceStore
from invoicing.main import app
from invoicing.services.invoice_service import InvoiceService

FIXED_NOW = datetime(2026, 3, 10, 12, 0, 0)


@pytest.fixture
def store():
    return InMemoryInvoiceStore()


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def service(store, now):
    return InvoiceService(store=store, clock=lambda: now)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_invoice_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
