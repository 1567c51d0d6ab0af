"""Activity collaborators.

get_*/set_* accessors mirror the other storefront ports; reset_activity()
restores the in-memory adapters. The in-memory adapters are bounded but only
meant for development and tests: a deployment sets real ones at startup.
"""

from storefront.activity import memory_adapter
from storefront.activity.port import ActivityLogger, CustomerFieldStore

_activity_logger: ActivityLogger | None = None
_field_store: CustomerFieldStore | None = None


def get_activity_logger() -> ActivityLogger:
    global _activity_logger
    if _activity_logger is None:
        _activity_logger = memory_adapter.InMemoryActivityLog()
    return _activity_logger


def set_activity_logger(activity_logger: ActivityLogger) -> None:
    global _activity_logger
    _activity_logger = activity_logger


def get_field_store() -> CustomerFieldStore:
    global _field_store
    if _field_store is None:
        _field_store = memory_adapter.InMemoryCustomerFieldStore()
    return _field_store


def set_field_store(field_store: CustomerFieldStore) -> None:
    global _field_store
    _field_store = field_store


def reset_activity() -> None:
    global _activity_logger, _field_store
    _activity_logger = None
    _field_store = None
