"""ShopperVisit aggregate: one tracked storefront action of a visitor.

A visit is recorded after the storefront has decided what to show. The
activity log and the continue-shopping page are updated from its events,
inline under sync processing and by the Engine under async processing.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from storefront.activity.events import CatalogEntityViewed, CatalogSearched, VendorReviewAdded
from storefront.domain import storefront


@storefront.aggregate
class ShopperVisit:
    customer_id = Identifier(required=True)
    store_id = Identifier()
    language = String(max_length=10)
    remote_address = String(max_length=64)
    path = String(max_length=2048)
    action = String(required=True, max_length=50)
    occurred_at = DateTime(required=True)

    @classmethod
    def _open(cls, visitor, action):
        return cls(
            customer_id=visitor.customer_id,
            store_id=visitor.store_id,
            language=visitor.language,
            remote_address=visitor.remote_address,
            path=visitor.path,
            action=action,
            occurred_at=datetime.now(UTC),
        )

    @classmethod
    def viewed(cls, visitor, kind, entity_id, subject, activity_key=None, remember_path=True):
        visit = cls._open(visitor, "view")
        visit.raise_(
            CatalogEntityViewed(
                visit_id=str(visit.id),
                kind=kind,
                entity_id=str(entity_id),
                subject=subject,
                activity_key=activity_key,
                remember_path=remember_path,
                customer_id=str(visit.customer_id),
                store_id=visit.store_id,
                language=visit.language,
                remote_address=visit.remote_address,
                path=visit.path,
                viewed_at=visit.occurred_at,
            )
        )
        return visit

    @classmethod
    def searched(cls, visitor):
        visit = cls._open(visitor, "search")
        visit.raise_(
            CatalogSearched(
                visit_id=str(visit.id),
                customer_id=str(visit.customer_id),
                store_id=visit.store_id,
                path=visit.path,
                searched_at=visit.occurred_at,
            )
        )
        return visit

    @classmethod
    def reviewed_vendor(cls, visitor, vendor_id, vendor_name):
        visit = cls._open(visitor, "vendor_review")
        visit.raise_(
            VendorReviewAdded(
                visit_id=str(visit.id),
                vendor_id=str(vendor_id),
                vendor_name=vendor_name,
                customer_id=str(visit.customer_id),
                language=visit.language,
                remote_address=visit.remote_address,
                added_at=visit.occurred_at,
            )
        )
        return visit
