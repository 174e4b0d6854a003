import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from invoicing.database.store import InvoiceStore
from invoicing.models.invoice import Invoice

logger = logging.getLogger(__name__)

# (amount, due date offset in days from now)
SAMPLE_INVOICES = [(Decimal(1000 + 500 * i), i - 5) for i in range(10)]


def seed_sample_data(store: InvoiceStore, now: datetime | None = None) -> int:
    """Load the demo invoices into an empty store.

    Half of them are already past due so overdue processing has something
    to do. Returns the number of invoices created.
    """
    if store.count() > 0:
        logger.info("seed.skipped", extra={"event": "seed.skipped", "existing": store.count()})
        return 0

    current = now or datetime.now(timezone.utc).replace(tzinfo=None)
    for amount, offset_days in SAMPLE_INVOICES:
        store.create(Invoice(amount=amount, due_date=current + timedelta(days=offset_days)))

    logger.info("seed.completed", extra={"event": "seed.completed", "created": len(SAMPLE_INVOICES)})
    return len(SAMPLE_INVOICES)
