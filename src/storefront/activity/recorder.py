"""Writes visit events to the activity log and the customer field store.

Both writes are best effort: a failing collaborator is logged and the event
is dropped, never retried.
"""

import structlog
from protean.utils.mixins import handle

from storefront.activity import get_activity_logger, get_field_store
from storefront.activity.events import CatalogEntityViewed, CatalogSearched, VendorReviewAdded
from storefront.activity.port import LAST_CONTINUE_SHOPPING_PAGE
from storefront.activity.visit import ShopperVisit
from storefront.domain import storefront
from storefront.localization import get_resources

logger = structlog.get_logger(__name__)


def _record_activity(action_key, entity_id, subject, customer_id, language, remote_address):
    try:
        message = get_resources().resolve(f"ActivityLog.{action_key}", language or "en")
        get_activity_logger().record(
            action_key,
            str(entity_id),
            str(customer_id),
            remote_address,
            message,
            subject,
        )
    except Exception as e:
        logger.error(
            "Failed to record customer activity",
            action_key=action_key,
            entity_id=str(entity_id),
            error=str(e),
        )


def _remember_path(customer_id, store_id, path):
    try:
        get_field_store().save_field(str(customer_id), LAST_CONTINUE_SHOPPING_PAGE, path, str(store_id))
    except Exception as e:
        logger.error(
            "Failed to remember continue shopping page",
            customer_id=str(customer_id),
            error=str(e),
        )


@storefront.event_handler(part_of=ShopperVisit)
class ShopperActivityRecorder:
    @handle(CatalogEntityViewed)
    def on_catalog_entity_viewed(self, event: CatalogEntityViewed) -> None:
        if event.remember_path:
            _remember_path(event.customer_id, event.store_id, event.path)
        if event.activity_key:
            _record_activity(
                event.activity_key,
                event.entity_id,
                event.subject,
                event.customer_id,
                event.language,
                event.remote_address,
            )

    @handle(CatalogSearched)
    def on_catalog_searched(self, event: CatalogSearched) -> None:
        _remember_path(event.customer_id, event.store_id, event.path)

    @handle(VendorReviewAdded)
    def on_vendor_review_added(self, event: VendorReviewAdded) -> None:
        _record_activity(
            "PublicStore.AddVendorReview",
            event.vendor_id,
            event.vendor_name,
            event.customer_id,
            event.language,
            event.remote_address,
        )
