"""Authorization collaborators.

Provides get_*/set_*/reset_* accessors for the capability and ACL checkers,
defaulting to the adapters in ``storefront.security.adapters``.
"""

from storefront.security.adapters import EntityAclChecker, VisitorCapabilityChecker
from storefront.security.port import AclChecker, CapabilityChecker

_capability_checker: CapabilityChecker | None = None
_acl_checker: AclChecker | None = None


def get_capability_checker() -> CapabilityChecker:
    global _capability_checker
    if _capability_checker is None:
        _capability_checker = VisitorCapabilityChecker()
    return _capability_checker


def set_capability_checker(checker: CapabilityChecker) -> None:
    global _capability_checker
    _capability_checker = checker


def get_acl_checker() -> AclChecker:
    global _acl_checker
    if _acl_checker is None:
        _acl_checker = EntityAclChecker()
    return _acl_checker


def set_acl_checker(checker: AclChecker) -> None:
    global _acl_checker
    _acl_checker = checker


def reset_security() -> None:
    """Reset both checkers to their defaults."""
    global _capability_checker, _acl_checker
    _capability_checker = None
    _acl_checker = None
