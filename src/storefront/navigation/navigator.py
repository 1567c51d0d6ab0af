"""Public catalog pages for every entity kind.

One flow serves categories, brands, collections, vendors and product tags:

    fetch by id → NOT_FOUND unless AccessPolicy.can_view
                → record a ShopperVisit (continue-shopping page, activity log)
                → build the display model with the kind's builder
                → resolve the template from the entity's layout
                → attach an edit link if AccessPolicy.can_edit
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.activity.tracking import record_view
from storefront.catalog.brand import Brand
from storefront.catalog.collection import Collection
from storefront.catalog.kinds import CatalogKind, EntityKind, catalog_kind
from storefront.catalog.product_tag import ProductTag
from storefront.display import get_builder, get_layout_resolver
from storefront.navigation.results import NOT_FOUND, Display, Redirect
from storefront.security.policy import AccessPolicy
from storefront.settings import get_settings
from storefront.vendor.overview import review_overview
from storefront.vendor.vendor import Vendor
from storefront.visitor import PagingFilter, VisitorContext

logger = structlog.get_logger(__name__)


def _display_order(entity):
    return (entity.display_order, entity.name)


class CatalogNavigator:
    def __init__(self, policy: AccessPolicy | None = None) -> None:
        self.policy = policy or AccessPolicy()

    # -------------------------------------------------------------------
    # Entity pages
    # -------------------------------------------------------------------
    def resolve(self, kind, entity_id, paging: PagingFilter | None, visitor: VisitorContext):
        """Return a Display for the entity page, or NOT_FOUND."""
        spec = catalog_kind(kind)
        entity = self._fetch(spec, entity_id)

        if not self.policy.can_view(entity, visitor):
            logger.info("Catalog entity not shown", kind=spec.kind.value, entity_id=str(entity_id))
            return NOT_FOUND

        return self._display(spec, entity, paging or PagingFilter(), visitor)

    def category(self, category_id, paging, visitor):
        return self.resolve(EntityKind.CATEGORY, category_id, paging, visitor)

    def brand(self, brand_id, paging, visitor):
        return self.resolve(EntityKind.BRAND, brand_id, paging, visitor)

    def collection(self, collection_id, paging, visitor):
        return self.resolve(EntityKind.COLLECTION, collection_id, paging, visitor)

    def vendor(self, vendor_id, paging, visitor):
        return self.resolve(EntityKind.VENDOR, vendor_id, paging, visitor)

    def products_by_tag(self, product_tag_id, paging, visitor):
        return self.resolve(EntityKind.PRODUCT_TAG, product_tag_id, paging, visitor)

    def products_by_tag_name(self, se_name, paging, visitor):
        if not se_name:
            return NOT_FOUND

        tags = current_domain.repository_for(ProductTag)._dao.query.filter(se_name=se_name).all().items
        if not tags:
            return NOT_FOUND

        spec = catalog_kind(EntityKind.PRODUCT_TAG)
        return self._display(spec, tags[0], paging or PagingFilter(), visitor)

    # -------------------------------------------------------------------
    # Listing pages
    # -------------------------------------------------------------------
    def brand_all(self, visitor: VisitorContext) -> Display:
        return Display(template="BrandAll", model={"brands": self._visible_summaries(Brand, visitor)})

    def collection_all(self, visitor: VisitorContext) -> Display:
        return Display(template="CollectionAll", model={"collections": self._visible_summaries(Collection, visitor)})

    def vendor_all(self, visitor: VisitorContext):
        """All visible vendors, or a redirect home when the vendor block is hidden."""
        if get_settings().vendors_block_items_to_display == 0:
            return Redirect(route="HomePage")

        return Display(template="VendorAll", model={"vendors": self._visible_summaries(Vendor, visitor)})

    def product_tags_all(self, visitor: VisitorContext) -> Display:
        tags = current_domain.repository_for(ProductTag)._dao.query.all().items
        tags = sorted(tags, key=lambda t: t.name.lower())
        return Display(
            template="ProductTagsAll",
            model={
                "store_id": visitor.store_id,
                "tags": [
                    {"id": str(t.id), "name": t.name, "se_name": t.se_name, "product_count": t.product_count}
                    for t in tags
                ],
            },
        )

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------
    def _fetch(self, spec: CatalogKind, entity_id):
        if not entity_id:
            return None
        try:
            return current_domain.repository_for(spec.aggregate_cls).get(entity_id)
        except ObjectNotFoundError:
            return None

    def _visible_summaries(self, aggregate_cls, visitor) -> list[dict]:
        entities = current_domain.repository_for(aggregate_cls)._dao.query.all().items
        visible = sorted((e for e in entities if self.policy.can_view(e, visitor)), key=_display_order)
        return [{"id": str(e.id), "name": e.name} for e in visible]

    def _display(self, spec: CatalogKind, entity, paging, visitor) -> Display:
        if spec.remembers_path or spec.activity_key:
            record_view(visitor, spec.kind.value, entity.id, entity.name, spec.activity_key, spec.remembers_path)

        model = get_builder(spec.kind).build(entity, paging, visitor)

        if spec.kind is EntityKind.VENDOR:
            model["review_overview"] = review_overview(entity).as_dict()
            template = spec.default_template
        else:
            template = get_layout_resolver().resolve(spec.kind, getattr(entity, "layout_id", None))

        edit_url = spec.edit_url(entity.id) if self.policy.can_edit(entity, visitor) else None
        return Display(template=template, model=model, edit_url=edit_url)
