"""Translation resources for human-facing storefront messages."""

from storefront.localization.dict_adapter import DictResourceLookup
from storefront.localization.port import ResourceLookup

_lookup: ResourceLookup | None = None


def get_resources() -> ResourceLookup:
    global _lookup
    if _lookup is None:
        _lookup = DictResourceLookup()
    return _lookup


def set_resources(lookup: ResourceLookup) -> None:
    global _lookup
    _lookup = lookup


def reset_resources() -> None:
    global _lookup
    _lookup = None
