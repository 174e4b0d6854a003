"""Domain models for the invoicing service."""

from invoicing.models.invoice import Invoice

__all__ = ["Invoice"]
