"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from invoicing.core.config import get_config
from invoicing.core.logging_config import configure_logging
from invoicing.database.db import get_store
from invoicing.database.init_db import seed_sample_data
from invoicing.database.store import InvoiceStore

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """Fail-fast config checks."""
    config = get_config()

    if config.is_production and config.SEED_SAMPLE_DATA:
        logger.warning(
            "startup.production.sample_data_enabled",
            extra={"event": "startup.production.sample_data_enabled"},
        )

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "api_prefix": config.API_PREFIX,
            "seed_sample_data": config.SEED_SAMPLE_DATA,
        },
    )


def bootstrap(store: InvoiceStore | None = None) -> None:
    """Initialize logging, validate configuration and seed demo invoices."""
    configure_logging()
    validate_startup_config()
    if get_config().SEED_SAMPLE_DATA:
        seed_sample_data(store or get_store())
