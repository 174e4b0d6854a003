"""Invoice model module."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from invoicing.core.enums import InvoiceStatus


@dataclass
class Invoice:
    """A billable record with an amount owed and a due date.

    ``invoice_id`` stays ``None`` until the store assigns one.
    ``late_fee`` and ``overdue_days`` are carried along but never set by the
    engine.
    """

    amount: Decimal
    due_date: datetime
    invoice_id: int | None = None
    paid_amount: Decimal = field(default_factory=lambda: Decimal("0"))
    status: InvoiceStatus = InvoiceStatus.PENDING
    is_paid: bool = False
    late_fee: Decimal = field(default_factory=lambda: Decimal("0"))
    overdue_days: int = 0

    @property
    def balance(self) -> Decimal:
        return self.amount - self.paid_amount

    @property
    def is_fully_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID and self.paid_amount == self.amount
