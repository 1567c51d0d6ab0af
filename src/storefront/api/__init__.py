"""Storefront API package."""

from storefront.api.routes import catalog_router, search_router, vendor_review_router

__all__ = ["catalog_router", "search_router", "vendor_review_router"]
