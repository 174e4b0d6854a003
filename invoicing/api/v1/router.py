"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from invoicing.api.v1 import health, invoices


def get_api_router(prefix: str) -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(health.router)
    api_router.include_router(invoices.router)
    return api_router
