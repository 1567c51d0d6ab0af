"""Category aggregate as seen by the public storefront."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from storefront.catalog.acl import dump_ids
from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A browsable product category.

    Unpublished categories are only previewable by visitors who can manage
    categories. ``customer_group_ids`` and ``store_ids`` restrict visibility;
    empty lists leave it open.
    """

    name = String(required=True, max_length=255)
    description = Text()
    parent_category_id = Identifier()
    published = Boolean(default=True)
    customer_group_ids = Text(default="[]")  # JSON array of customer group ids
    store_ids = Text(default="[]")  # JSON array of store ids
    layout_id = Identifier()
    display_order = Integer(default=0)
    created_at = DateTime()

    @classmethod
    def create(
        cls,
        name,
        description=None,
        parent_category_id=None,
        published=True,
        customer_group_ids=None,
        store_ids=None,
        layout_id=None,
        display_order=0,
    ):
        return cls(
            name=name,
            description=description,
            parent_category_id=parent_category_id,
            published=published,
            customer_group_ids=dump_ids(customer_group_ids),
            store_ids=dump_ids(store_ids),
            layout_id=layout_id,
            display_order=display_order,
            created_at=datetime.now(UTC),
        )
