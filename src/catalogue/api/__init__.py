"""Catalogue domain API package."""

from catalogue.api.routes import menu_router, offer_router

__all__ = ["menu_router", "offer_router"]
