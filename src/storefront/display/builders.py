"""Repository-backed display model builders and the table layout resolver."""

from protean.utils.globals import current_domain

from storefront.catalog.category import Category
from storefront.catalog.kinds import CATALOG_KINDS, EntityKind, kind_of
from storefront.display.port import DisplayModelBuilder, LayoutResolver
from storefront.security.policy import AccessPolicy


def _context(paging, visitor) -> dict:
    return {
        "paging": paging.as_dict(),
        "language": visitor.language,
        "currency": visitor.currency,
        "store_id": visitor.store_id,
    }


class EntityModelBuilder(DisplayModelBuilder):
    """Summary model shared by brands and collections."""

    def build(self, entity, paging, visitor) -> dict:
        return {
            "kind": kind_of(entity).kind.value,
            "id": str(entity.id),
            "name": entity.name,
            "description": entity.description,
            **_context(paging, visitor),
        }


class CategoryModelBuilder(EntityModelBuilder):
    """Adds the visible subcategories, ordered for display."""

    def __init__(self, policy: AccessPolicy | None = None) -> None:
        self.policy = policy or AccessPolicy()

    def build(self, entity, paging, visitor) -> dict:
        model = super().build(entity, paging, visitor)
        children = (
            current_domain.repository_for(Category)._dao.query.filter(parent_category_id=str(entity.id)).all().items
        )
        visible = [c for c in children if self.policy.can_view(c, visitor)]
        visible.sort(key=lambda c: (c.display_order, c.name))
        model["subcategories"] = [{"id": str(c.id), "name": c.name} for c in visible]
        return model


class VendorModelBuilder(DisplayModelBuilder):
    def build(self, entity, paging, visitor) -> dict:
        return {
            "kind": EntityKind.VENDOR.value,
            "id": str(entity.id),
            "name": entity.name,
            "description": entity.description,
            "allow_customer_reviews": entity.allow_customer_reviews,
            **_context(paging, visitor),
        }


class ProductTagModelBuilder(DisplayModelBuilder):
    def build(self, entity, paging, visitor) -> dict:
        return {
            "kind": EntityKind.PRODUCT_TAG.value,
            "id": str(entity.id),
            "name": entity.name,
            "se_name": entity.se_name,
            "product_count": entity.product_count,
            **_context(paging, visitor),
        }


class TableLayoutResolver(LayoutResolver):
    """Looks layout ids up in a table, falling back to the kind's default template."""

    def __init__(self, layouts: dict[str, str] | None = None) -> None:
        self.layouts = dict(layouts or {})

    def register(self, layout_id: str, view_path: str) -> None:
        self.layouts[str(layout_id)] = view_path

    def resolve(self, kind, layout_id) -> str:
        if layout_id and str(layout_id) in self.layouts:
            return self.layouts[str(layout_id)]
        return CATALOG_KINDS[kind].default_template
