"""Shared BDD fixtures and step definitions for the storefront."""

from dataclasses import replace

import pytest
from pytest_bdd import given, parsers
from storefront.settings import get_settings, set_settings


@pytest.fixture()
def result():
    """Container for the outcome (or error) of the last action."""
    return {"outcome": None, "exc": None}


def _update_settings(**changes):
    set_settings(replace(get_settings(), **changes))


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an active vendor "{name}"'), target_fixture="vendor")
def active_vendor(catalog, name):
    return catalog.vendor(name=name)


@given(parsers.cfparse('a vendor "{name}" that does not accept reviews'), target_fixture="vendor")
def closed_vendor(catalog, name):
    return catalog.vendor(name=name, allow_customer_reviews=False)


@given(
    parsers.cfparse('an approved review of the vendor by customer "{customer_id}"'),
    target_fixture="review",
)
def approved_review(catalog, vendor, customer_id):
    return catalog.review(vendor, customer_id=customer_id, approved=True)


@given("anonymous vendor reviews are allowed")
def anonymous_reviews_allowed():
    _update_settings(allow_anonymous_users_to_review_vendor=True)


@given("vendor reviews must be approved")
def reviews_need_approval():
    _update_settings(vendor_reviews_must_be_approved=True)
