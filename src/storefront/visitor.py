"""Per-request visitor context and the catalog paging/filter command.

Neither is persisted. The API layer builds them from the incoming request;
tests build them directly.
"""

from dataclasses import dataclass, field
from enum import Enum


class Capability(Enum):
    """Named permissions a visitor's account can hold."""

    ACCESS_ADMIN_PANEL = "AccessAdminPanel"
    MANAGE_CATEGORIES = "ManageCategories"
    MANAGE_BRANDS = "ManageBrands"
    MANAGE_COLLECTIONS = "ManageCollections"
    MANAGE_VENDORS = "ManageVendors"
    MANAGE_PRODUCT_TAGS = "ManageProductTags"


@dataclass(frozen=True)
class VisitorContext:
    """Who is looking, from which store, in which language and currency."""

    customer_id: str
    is_guest: bool = True
    customer_group_ids: frozenset[str] = frozenset()
    store_id: str = "default"
    language: str = "en"
    currency: str = "USD"
    capabilities: frozenset[Capability] = frozenset()
    remote_address: str | None = None
    path: str = "/"

    def holds(self, capability: Capability) -> bool:
        return capability in self.capabilities


@dataclass(frozen=True)
class PagingFilter:
    """Paging, sorting and filtering options for catalog listings."""

    page_number: int = 1
    page_size: int = 12
    order_by: int | None = None
    view_mode: str = "grid"
    price_min: float | None = None
    price_max: float | None = None
    spec_options: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.page_number < 1:
            object.__setattr__(self, "page_number", 1)
        if self.page_size < 1:
            object.__setattr__(self, "page_size", 12)

    def as_dict(self) -> dict:
        return {
            "page_number": self.page_number,
            "page_size": self.page_size,
            "order_by": self.order_by,
            "view_mode": self.view_mode,
            "price_min": self.price_min,
            "price_max": self.price_max,
            "spec_options": list(self.spec_options),
        }
