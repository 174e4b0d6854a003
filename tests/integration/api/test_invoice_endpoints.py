from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from invoicing.core.config import get_config
from invoicing.core.dependencies import get_invoice_service, get_settings
from invoicing.core.enums import InvoiceStatus
from invoicing.main import app
from invoicing.models.invoice import Invoice

BASE = "/api/invoice/invoices"


def _iso(days_from_now: int) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days_from_now)).isoformat()


def _create(client, amount=100, days_from_now=30) -> int:
    response = client.post(BASE, json={"amount": amount, "dueDate": _iso(days_from_now)})
    assert response.status_code == 201
    return response.json()["invoiceId"]


def test_health_reports_configured_service(client):
    cfg = replace(get_config(), APP_NAME="Billing", APP_VERSION="9.9.9")
    app.dependency_overrides[get_settings] = lambda: cfg

    response = client.get("/api/invoice/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "Billing", "version": "9.9.9"}


def test_list_on_empty_store_returns_404(client):
    response = client.get(BASE)
    assert response.status_code == 404
    assert response.json() == {"message": "Invoice not found."}


def test_create_then_list(client):
    response = client.post(BASE, json={"amount": 250.5, "dueDate": "2026-12-01T09:30:00"})

    assert response.status_code == 201
    assert response.json() == {"message": "Invoice created successfully.", "invoiceId": 1}

    listed = client.get(BASE)
    assert listed.status_code == 200
    assert listed.json() == [
        {"invoiceId": 1, "amount": 250.5, "paidAmount": 0.0, "dueDate": "2026-12-01", "status": "Pending"}
    ]


def test_create_with_non_positive_amount_returns_400(client):
    response = client.post(BASE, json={"amount": 0, "dueDate": _iso(5)})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid Input"}


def test_create_with_malformed_body_returns_400(client):
    response = client.post(BASE, json={"amount": "lots"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid input data."}


def test_pay_unknown_invoice_returns_404(client):
    response = client.post(f"{BASE}/9/pay", json={"paymentAmount": 10})
    assert response.status_code == 404
    assert response.json() == {"message": "Invoice with ID 9 not found."}


def test_partial_then_full_payment(client, store):
    invoice_id = _create(client, amount=100)

    partial = client.post(f"{BASE}/{invoice_id}/pay", json={"paymentAmount": 40})
    assert partial.status_code == 204
    assert store.get_by_id(invoice_id).status == InvoiceStatus.PENDING

    full = client.post(f"{BASE}/{invoice_id}/pay", json={"paymentAmount": 60})
    assert full.status_code == 204
    stored = store.get_by_id(invoice_id)
    assert stored.status == InvoiceStatus.PAID
    assert stored.paid_amount == Decimal("100")


def test_overpayment_returns_400(client):
    invoice_id = _create(client, amount=100)

    response = client.post(f"{BASE}/{invoice_id}/pay", json={"paymentAmount": 101})

    assert response.status_code == 400
    assert response.json() == {"message": "Payment amount is greater than the invoice amount."}


def test_process_overdue_rejects_negative_late_fee(client):
    response = client.post(f"{BASE}/process-overdue", json={"lateFee": -1, "overdueDays": 5})
    assert response.status_code == 400
    assert response.json() == {"message": "LateFee is Less than Zero."}


def test_process_overdue_rejects_negative_overdue_days(client):
    response = client.post(f"{BASE}/process-overdue", json={"lateFee": 10, "overdueDays": -1})
    assert response.status_code == 400
    assert response.json() == {"message": "OverDueDays is less than Zero. This will create backdated invoices."}


def test_process_overdue_with_out_of_range_days_leaves_invoices_alone(client, store):
    invoice_id = _create(client, amount=50, days_from_now=-1)

    response = client.post(f"{BASE}/process-overdue", json={"lateFee": 10, "overdueDays": 3_000_000})

    assert response.status_code == 400
    assert response.json()["message"].startswith("OverDueDays is too large")
    assert store.get_by_id(invoice_id).status == InvoiceStatus.PENDING
    assert store.count() == 1


def test_process_overdue_rolls_over_past_due_invoices(client, store):
    partially_paid = store.create(
        Invoice(
            amount=Decimal("100"),
            due_date=datetime.now(timezone.utc).replace(tzinfo=None) - timedelta(days=2),
            paid_amount=Decimal("30"),
            is_paid=True,
        )
    )
    unpaid = _create(client, amount=50, days_from_now=-1)

    response = client.post(f"{BASE}/process-overdue", json={"lateFee": 10, "overdueDays": 5})

    assert response.status_code == 204
    assert store.get_by_id(partially_paid.invoice_id).status == InvoiceStatus.PAID
    assert store.get_by_id(unpaid).status == InvoiceStatus.VOID

    listed = client.get(BASE).json()
    assert [row["amount"] for row in listed[2:]] == [80.0, 60.0]
    expected_due = (datetime.now(timezone.utc) + timedelta(days=5)).strftime("%Y-%m-%d")
    assert {row["dueDate"] for row in listed[2:]} == {expected_due}


def test_unexpected_errors_return_canned_500(client):
    class _BrokenService:
        def list_invoices(self):
            raise RuntimeError("store exploded")

        def pay_invoice(self, invoice_id, payment_amount):
            raise RuntimeError("store exploded")

        def create_invoice(self, amount, due_date):
            raise RuntimeError("store exploded")

        def process_overdue_invoices(self, late_fee, overdue_days):
            raise RuntimeError("store exploded")

    app.dependency_overrides[get_invoice_service] = lambda: _BrokenService()

    listed = client.get(BASE)
    assert listed.status_code == 500
    assert listed.json() == {"message": "An error occurred while retrieving invoices."}

    created = client.post(BASE, json={"amount": 10, "dueDate": _iso(5)})
    assert created.status_code == 500
    assert created.json() == {"message": "An error occurred while creating the invoice."}

    paid = client.post(f"{BASE}/1/pay", json={"paymentAmount": 1})
    assert paid.status_code == 500
    assert paid.json() == {"message": "An error occurred while processing the payment."}

    processed = client.post(f"{BASE}/process-overdue", json={"lateFee": 1, "overdueDays": 1})
    assert processed.status_code == 500
    assert processed.json() == {"message": "An error occurred while processing overdue invoices."}
