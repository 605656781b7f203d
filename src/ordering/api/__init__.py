"""Ordering domain API package."""

from ordering.api.routes import get_ledger, order_router

__all__ = ["order_router", "get_ledger"]
