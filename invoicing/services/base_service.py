"""Shared service base holding the store and clock."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from invoicing.database.db import get_store
from invoicing.database.store import InvoiceStore

Clock = Callable[[], datetime]


def utcnow_naive() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseService:
    """Base class for services that operate on an invoice store."""

    def __init__(self, store: InvoiceStore | None = None, clock: Clock | None = None) -> None:
        self.store = store or get_store()
        self._clock = clock or utcnow_naive

    def now(self) -> datetime:
        """Current time as naive UTC."""
        return self._clock()

    @staticmethod
    def to_naive_utc(value: datetime) -> datetime:
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)
