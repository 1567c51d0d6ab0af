"""Tests for the Vendor aggregate and its review overview."""

import pytest
from protean.exceptions import ValidationError
from storefront.vendor.overview import review_overview
from storefront.vendor.vendor import Vendor


class TestVendorFlags:
    def test_active_vendor_accepts_reviews(self):
        assert Vendor(name="Northwind").accepts_reviews() is True

    def test_reviews_disabled(self):
        assert Vendor(name="Northwind", allow_customer_reviews=False).accepts_reviews() is False

    def test_inactive_vendor_does_not_accept_reviews(self):
        assert Vendor(name="Northwind", active=False).accepts_reviews() is False

    def test_deleted_vendor_is_not_visible(self):
        assert Vendor(name="Northwind", deleted=True).is_visible is False


class TestApprovedRating:
    def test_adds_rating_to_totals(self):
        vendor = Vendor(name="Northwind")
        vendor.add_approved_rating(4)
        vendor.add_approved_rating(5)
        assert vendor.approved_rating_sum == 9
        assert vendor.approved_total_reviews == 2

    def test_rejects_out_of_range_rating(self):
        vendor = Vendor(name="Northwind")
        with pytest.raises(ValidationError):
            vendor.add_approved_rating(7)


class TestReviewOverview:
    def test_projects_current_totals(self):
        vendor = Vendor(name="Northwind", approved_rating_sum=14, approved_total_reviews=3)
        overview = review_overview(vendor)
        assert overview.vendor_id == str(vendor.id)
        assert overview.rating_sum == 14
        assert overview.total_reviews == 3
        assert overview.allow_customer_reviews is True
        assert overview.average_rating == 4.67

    def test_is_recomputed_on_demand(self):
        vendor = Vendor(name="Northwind")
        before = review_overview(vendor)
        vendor.add_approved_rating(3)
        after = review_overview(vendor)
        assert before.total_reviews == 0
        assert after.total_reviews == 1

    def test_average_without_reviews_is_zero(self):
        assert review_overview(Vendor(name="Northwind")).average_rating == 0.0
