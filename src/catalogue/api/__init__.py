"""Catalogue domain API package."""

from catalogue.api.routes import category_router, food_router

__all__ = ["food_router", "category_router"]
