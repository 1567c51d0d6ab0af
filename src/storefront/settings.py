"""Storefront business settings.

Values come from ``STOREFRONT_*`` environment variables. Tests and the API
swap them with set_settings() / reset_settings().
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class StorefrontSettings:
    """Vendor and catalog settings consulted by the storefront."""

    allow_anonymous_users_to_review_vendor: bool = False
    vendor_reviews_must_be_approved: bool = False
    vendors_block_items_to_display: int = 3
    product_search_term_minimum_length: int = 3
    search_autocomplete_max_results: int = 10

    @classmethod
    def from_env(cls) -> "StorefrontSettings":
        return cls(
            allow_anonymous_users_to_review_vendor=_env_bool("STOREFRONT_ALLOW_ANONYMOUS_VENDOR_REVIEWS", False),
            vendor_reviews_must_be_approved=_env_bool("STOREFRONT_VENDOR_REVIEWS_MUST_BE_APPROVED", False),
            vendors_block_items_to_display=_env_int("STOREFRONT_VENDORS_BLOCK_ITEMS_TO_DISPLAY", 3),
            product_search_term_minimum_length=_env_int("STOREFRONT_SEARCH_TERM_MINIMUM_LENGTH", 3),
            search_autocomplete_max_results=_env_int("STOREFRONT_SEARCH_AUTOCOMPLETE_MAX_RESULTS", 10),
        )


_current_settings: StorefrontSettings | None = None


def get_settings() -> StorefrontSettings:
    """Return the active settings, loading them from the environment on first use."""
    global _current_settings
    if _current_settings is None:
        _current_settings = StorefrontSettings.from_env()
    return _current_settings


def set_settings(settings: StorefrontSettings) -> None:
    """Override the active settings (useful for tests)."""
    global _current_settings
    _current_settings = settings


def reset_settings() -> None:
    """Drop overrides; the next get_settings() reads the environment again."""
    global _current_settings
    _current_settings = None
