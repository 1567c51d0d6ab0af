"""Display model builders (one per entity kind) and the layout resolver."""

from storefront.catalog.kinds import EntityKind
from storefront.display.builders import (
    CategoryModelBuilder,
    EntityModelBuilder,
    ProductTagModelBuilder,
    TableLayoutResolver,
    VendorModelBuilder,
)
from storefront.display.port import DisplayModelBuilder, LayoutResolver

_builders: dict[EntityKind, DisplayModelBuilder] = {}
_layout_resolver: LayoutResolver | None = None


def _default_builders() -> dict[EntityKind, DisplayModelBuilder]:
    return {
        EntityKind.CATEGORY: CategoryModelBuilder(),
        EntityKind.BRAND: EntityModelBuilder(),
        EntityKind.COLLECTION: EntityModelBuilder(),
        EntityKind.VENDOR: VendorModelBuilder(),
        EntityKind.PRODUCT_TAG: ProductTagModelBuilder(),
    }


def get_builder(kind: EntityKind) -> DisplayModelBuilder:
    if not _builders:
        _builders.update(_default_builders())
    return _builders[kind]


def set_builder(kind: EntityKind, builder: DisplayModelBuilder) -> None:
    if not _builders:
        _builders.update(_default_builders())
    _builders[kind] = builder


def get_layout_resolver() -> LayoutResolver:
    global _layout_resolver
    if _layout_resolver is None:
        _layout_resolver = TableLayoutResolver()
    return _layout_resolver


def set_layout_resolver(resolver: LayoutResolver) -> None:
    global _layout_resolver
    _layout_resolver = resolver


def reset_display() -> None:
    global _layout_resolver
    _builders.clear()
    _layout_resolver = None
