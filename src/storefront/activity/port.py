"""Activity tracking ports (abstract interfaces).

Both collaborators are written to best-effort: the storefront never waits
on them and never fails a request because of them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ActivityEntry:
    action_key: str
    entity_id: str
    customer_id: str
    remote_address: str | None
    message: str
    subject: str
    recorded_at: datetime


class ActivityLogger(ABC):
    """Customer activity log (``PublicStore.ViewCategory`` and friends)."""

    @abstractmethod
    def record(
        self,
        action_key: str,
        entity_id: str,
        customer_id: str,
        remote_address: str | None,
        message: str,
        subject: str,
    ) -> None: ...


class CustomerFieldStore(ABC):
    """Per-customer, per-store attribute storage."""

    @abstractmethod
    def save_field(self, customer_id: str, key: str, value: str, store_id: str) -> None: ...

    @abstractmethod
    def get_field(self, customer_id: str, key: str, store_id: str) -> str | None: ...


LAST_CONTINUE_SHOPPING_PAGE = "LastContinueShoppingPage"
