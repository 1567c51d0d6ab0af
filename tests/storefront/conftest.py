"""Shared fixtures for storefront tests.

``catalog`` persists aggregates with sensible defaults; ``make_visitor``
builds visitor contexts.
"""

import pytest
from protean import current_domain
from storefront.activity import get_activity_logger, get_field_store
from storefront.catalog.brand import Brand
from storefront.catalog.category import Category
from storefront.catalog.collection import Collection
from storefront.catalog.product_tag import ProductTag
from storefront.vendor.review import VendorReview
from storefront.vendor.vendor import Vendor
from storefront.visitor import Capability, VisitorContext

MANAGERS = frozenset(
    {
        Capability.ACCESS_ADMIN_PANEL,
        Capability.MANAGE_CATEGORIES,
        Capability.MANAGE_BRANDS,
        Capability.MANAGE_COLLECTIONS,
        Capability.MANAGE_VENDORS,
    }
)


def _visitor(**overrides) -> VisitorContext:
    defaults = {
        "customer_id": "cust-001",
        "is_guest": False,
        "customer_group_ids": frozenset({"registered"}),
        "store_id": "store-1",
        "language": "en",
        "currency": "USD",
        "remote_address": "10.0.0.1",
        "path": "/catalog/page",
    }
    defaults.update(overrides)
    return VisitorContext(**defaults)


class CatalogBuilder:
    """Creates and persists storefront aggregates."""

    def _persist(self, entity):
        current_domain.repository_for(type(entity)).add(entity)
        return entity

    def category(self, **overrides):
        return self._persist(Category.create(**{"name": "Shoes", **overrides}))

    def brand(self, **overrides):
        return self._persist(Brand.create(**{"name": "Acme", **overrides}))

    def collection(self, **overrides):
        return self._persist(Collection.create(**{"name": "Summer Picks", **overrides}))

    def vendor(self, **overrides):
        return self._persist(Vendor(**{"name": "Northwind Traders", **overrides}))

    def tag(self, **overrides):
        return self._persist(ProductTag.create(**{"name": "Running Gear", **overrides}))

    def review(self, vendor, **overrides):
        defaults = {
            "vendor_id": str(vendor.id),
            "customer_id": "cust-author",
            "title": "Fast shipping",
            "review_text": "Arrived two days early and well packed.",
            "rating": 5,
            "approved": False,
        }
        defaults.update(overrides)
        review = self._persist(VendorReview.submit(**defaults))
        return current_domain.repository_for(VendorReview).get(review.id)


@pytest.fixture()
def catalog():
    return CatalogBuilder()


@pytest.fixture()
def make_visitor():
    return _visitor


@pytest.fixture()
def visitor():
    return _visitor()


@pytest.fixture()
def guest():
    return _visitor(customer_id="guest-42", is_guest=True, customer_group_ids=frozenset({"guests"}))


@pytest.fixture()
def manager():
    return _visitor(customer_id="admin-1", capabilities=MANAGERS)


@pytest.fixture()
def activity_log():
    return get_activity_logger()


@pytest.fixture()
def field_store():
    return get_field_store()
