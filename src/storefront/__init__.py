"""Storefront bounded context."""
