"""Product tag aggregate. Tags have no publish flag and no ACL."""

import re

from protean.exceptions import ValidationError
from protean.fields import Integer, String

from storefront.domain import storefront

_SE_NAME_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    return _SE_NAME_PATTERN.sub("-", name.strip().lower()).strip("-")


@storefront.aggregate
class ProductTag:
    name = String(required=True, max_length=255)
    se_name = String(required=True, max_length=255)
    product_count = Integer(default=0, min_value=0)

    @classmethod
    def create(cls, name, se_name=None, product_count=0):
        se_name = se_name or slugify(name)
        if not se_name:
            raise ValidationError({"se_name": ["Tag name must contain at least one letter or digit"]})
        return cls(name=name, se_name=se_name, product_count=product_count)
