"""The closed set of catalog entity kinds and their per-kind lookups.

Categories, brands, collections, vendors and product tags share one
navigation flow; everything that differs between them (aggregate class,
manage capability, activity log key, admin edit route, default template)
is looked up here by kind.
"""

from dataclasses import dataclass
from enum import Enum

from storefront.catalog.brand import Brand
from storefront.catalog.category import Category
from storefront.catalog.collection import Collection
from storefront.catalog.product_tag import ProductTag
from storefront.vendor.vendor import Vendor
from storefront.visitor import Capability


class EntityKind(Enum):
    CATEGORY = "category"
    BRAND = "brand"
    COLLECTION = "collection"
    VENDOR = "vendor"
    PRODUCT_TAG = "product_tag"


class Visibility(Enum):
    """How a kind decides whether a visitor may see an entity."""

    PUBLISHED_WITH_ACL = "published_with_acl"
    ACTIVE = "active"
    EXISTS = "exists"


@dataclass(frozen=True)
class CatalogKind:
    kind: EntityKind
    aggregate_cls: type
    manage_capability: Capability
    visibility: Visibility
    activity_key: str | None
    admin_area: str
    default_template: str
    remembers_path: bool = True

    def edit_url(self, entity_id) -> str:
        return f"/admin/{self.admin_area}/edit/{entity_id}"


CATALOG_KINDS: dict[EntityKind, CatalogKind] = {
    EntityKind.CATEGORY: CatalogKind(
        kind=EntityKind.CATEGORY,
        aggregate_cls=Category,
        manage_capability=Capability.MANAGE_CATEGORIES,
        visibility=Visibility.PUBLISHED_WITH_ACL,
        activity_key="PublicStore.ViewCategory",
        admin_area="category",
        default_template="CategoryLayout.ProductsInGridOrLines",
    ),
    EntityKind.BRAND: CatalogKind(
        kind=EntityKind.BRAND,
        aggregate_cls=Brand,
        manage_capability=Capability.MANAGE_BRANDS,
        visibility=Visibility.PUBLISHED_WITH_ACL,
        activity_key="PublicStore.ViewBrand",
        admin_area="brand",
        default_template="BrandLayout.ProductsInGridOrLines",
    ),
    EntityKind.COLLECTION: CatalogKind(
        kind=EntityKind.COLLECTION,
        aggregate_cls=Collection,
        manage_capability=Capability.MANAGE_COLLECTIONS,
        visibility=Visibility.PUBLISHED_WITH_ACL,
        activity_key="PublicStore.ViewCollection",
        admin_area="collection",
        default_template="CollectionLayout.ProductsInGridOrLines",
    ),
    EntityKind.VENDOR: CatalogKind(
        kind=EntityKind.VENDOR,
        aggregate_cls=Vendor,
        manage_capability=Capability.MANAGE_VENDORS,
        visibility=Visibility.ACTIVE,
        activity_key=None,
        admin_area="vendor",
        default_template="Vendor",
    ),
    EntityKind.PRODUCT_TAG: CatalogKind(
        kind=EntityKind.PRODUCT_TAG,
        aggregate_cls=ProductTag,
        manage_capability=Capability.MANAGE_PRODUCT_TAGS,
        visibility=Visibility.EXISTS,
        activity_key=None,
        admin_area="producttag",
        default_template="ProductsByTag",
        remembers_path=False,
    ),
}

_KIND_BY_CLASS = {spec.aggregate_cls: spec for spec in CATALOG_KINDS.values()}


def catalog_kind(kind: EntityKind | str) -> CatalogKind:
    return CATALOG_KINDS[EntityKind(kind)]


def kind_of(entity) -> CatalogKind:
    """Look up the kind of an aggregate instance."""
    try:
        return _KIND_BY_CLASS[type(entity)]
    except KeyError:
        raise TypeError(f"{type(entity).__name__} is not a catalog entity") from None
