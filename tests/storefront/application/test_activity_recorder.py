"""Application tests for the shopper activity recorder and the in-memory adapters."""

from datetime import UTC, datetime

from storefront.activity import set_activity_logger, set_field_store
from storefront.activity.events import CatalogEntityViewed, CatalogSearched, VendorReviewAdded
from storefront.activity.memory_adapter import InMemoryActivityLog, InMemoryCustomerFieldStore
from storefront.activity.port import LAST_CONTINUE_SHOPPING_PAGE, ActivityLogger, CustomerFieldStore
from storefront.activity.recorder import ShopperActivityRecorder
from storefront.activity.tracking import record_search, record_vendor_review, record_view


class _BrokenLog(ActivityLogger):
    def record(self, *args, **kwargs):
        raise ConnectionError("activity store down")


class _BrokenFields(CustomerFieldStore):
    def save_field(self, *args, **kwargs):
        raise ConnectionError("field store down")

    def get_field(self, *args, **kwargs):
        return None


def _viewed(**overrides):
    defaults = {
        "visit_id": "visit-1",
        "kind": "category",
        "entity_id": "cat-1",
        "subject": "Shoes",
        "activity_key": "PublicStore.ViewCategory",
        "remember_path": True,
        "customer_id": "cust-001",
        "store_id": "store-1",
        "language": "en",
        "remote_address": "10.0.0.1",
        "path": "/catalog/categories/cat-1",
        "viewed_at": datetime.now(UTC),
    }
    defaults.update(overrides)
    return CatalogEntityViewed(**defaults)


class TestRecordingThroughEvents:
    def test_view_writes_activity_and_continue_shopping(self, visitor, activity_log, field_store):
        record_view(visitor, "category", "cat-1", "Shoes", "PublicStore.ViewCategory")

        assert activity_log.keys() == ["PublicStore.ViewCategory"]
        entry = activity_log.entries[0]
        assert entry.entity_id == "cat-1"
        assert entry.subject == "Shoes"
        assert entry.remote_address == visitor.remote_address
        assert field_store.get_field(visitor.customer_id, LAST_CONTINUE_SHOPPING_PAGE, visitor.store_id) == (
            visitor.path
        )

    def test_view_without_remembering_path(self, visitor, activity_log, field_store):
        record_view(visitor, "brand", "b-1", "Acme", "PublicStore.ViewBrand", remember_path=False)

        assert activity_log.keys() == ["PublicStore.ViewBrand"]
        assert field_store.fields == {}

    def test_search_only_remembers_path(self, make_visitor, activity_log, field_store):
        shopper = make_visitor(path="/search?q=boots")
        record_search(shopper)

        assert activity_log.entries == []
        assert field_store.get_field(shopper.customer_id, LAST_CONTINUE_SHOPPING_PAGE, shopper.store_id) == (
            "/search?q=boots"
        )

    def test_vendor_review_is_logged(self, visitor, activity_log):
        record_vendor_review(visitor, "v-1", "Northwind")

        assert activity_log.keys() == ["PublicStore.AddVendorReview"]
        assert activity_log.entries[0].subject == "Northwind"


class TestRecorderFailures:
    def test_failing_activity_log_is_dropped(self, field_store):
        set_activity_logger(_BrokenLog())
        ShopperActivityRecorder().on_catalog_entity_viewed(_viewed())

        assert field_store.get_field("cust-001", LAST_CONTINUE_SHOPPING_PAGE, "store-1") == "/catalog/categories/cat-1"

    def test_failing_field_store_does_not_skip_activity(self, activity_log):
        set_field_store(_BrokenFields())
        ShopperActivityRecorder().on_catalog_entity_viewed(_viewed())

        assert activity_log.keys() == ["PublicStore.ViewCategory"]

    def test_failing_collaborators_never_raise(self):
        set_activity_logger(_BrokenLog())
        set_field_store(_BrokenFields())
        recorder = ShopperActivityRecorder()

        recorder.on_catalog_searched(
            CatalogSearched(
                visit_id="visit-2",
                customer_id="cust-001",
                store_id="store-1",
                path="/search",
                searched_at=datetime.now(UTC),
            )
        )
        recorder.on_vendor_review_added(
            VendorReviewAdded(
                visit_id="visit-3",
                vendor_id="v-1",
                vendor_name="Northwind",
                customer_id="cust-001",
                added_at=datetime.now(UTC),
            )
        )

    def test_failures_through_tracking_do_not_raise(self, visitor):
        set_activity_logger(_BrokenLog())
        set_field_store(_BrokenFields())
        record_view(visitor, "category", "cat-1", "Shoes", "PublicStore.ViewCategory")


class TestInMemoryAdapterBounds:
    def test_activity_log_drops_oldest_entries(self):
        log = InMemoryActivityLog(max_entries=2)
        for n in range(3):
            log.record(f"Key.{n}", f"e-{n}", "cust-001", None, "message", "subject")

        assert log.keys() == ["Key.1", "Key.2"]

    def test_field_store_drops_least_recently_saved(self):
        store = InMemoryCustomerFieldStore(max_entries=2)
        store.save_field("a", LAST_CONTINUE_SHOPPING_PAGE, "/a", "s")
        store.save_field("b", LAST_CONTINUE_SHOPPING_PAGE, "/b", "s")
        store.save_field("a", LAST_CONTINUE_SHOPPING_PAGE, "/a2", "s")
        store.save_field("c", LAST_CONTINUE_SHOPPING_PAGE, "/c", "s")

        assert store.get_field("b", LAST_CONTINUE_SHOPPING_PAGE, "s") is None
        assert store.get_field("a", LAST_CONTINUE_SHOPPING_PAGE, "s") == "/a2"
        assert store.get_field("c", LAST_CONTINUE_SHOPPING_PAGE, "s") == "/c"
