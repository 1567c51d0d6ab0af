"""Domain events for the ShopperVisit aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="ShopperVisit")
class CatalogEntityViewed:
    """A visitor opened a catalog page they are allowed to see."""

    __version__ = 1

    visit_id = Identifier(required=True)
    kind = String(required=True, max_length=50)
    entity_id = Identifier(required=True)
    subject = String(max_length=255)
    activity_key = String(max_length=100)
    remember_path = Boolean(default=True)
    customer_id = Identifier(required=True)
    store_id = Identifier()
    language = String(max_length=10)
    remote_address = String(max_length=64)
    path = String(max_length=2048)
    viewed_at = DateTime(required=True)


@storefront.event(part_of="ShopperVisit")
class CatalogSearched:
    """A visitor ran a catalog search."""

    __version__ = 1

    visit_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    store_id = Identifier()
    path = String(max_length=2048)
    searched_at = DateTime(required=True)


@storefront.event(part_of="ShopperVisit")
class VendorReviewAdded:
    """A visitor's review of a vendor was accepted for storage."""

    __version__ = 1

    visit_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    vendor_name = String(max_length=255)
    customer_id = Identifier(required=True)
    language = String(max_length=10)
    remote_address = String(max_length=64)
    added_at = DateTime(required=True)
