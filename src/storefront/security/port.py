"""Authorization ports (abstract interfaces).

AccessPolicy depends only on these contracts, so the permission and ACL
sources can be swapped (account service, admin backend, test doubles)
without touching the visibility rules.
"""

from abc import ABC, abstractmethod

from storefront.visitor import Capability, VisitorContext


class CapabilityChecker(ABC):
    """Answers whether a visitor's account holds a named capability."""

    @abstractmethod
    def has_capability(self, visitor: VisitorContext, capability: Capability) -> bool: ...


class AclChecker(ABC):
    """Evaluates an entity's customer-group and store restrictions."""

    @abstractmethod
    def authorize_groups(self, entity, visitor: VisitorContext) -> bool:
        """True when the visitor belongs to one of the entity's customer groups."""
        ...

    @abstractmethod
    def authorize_store(self, entity, store_id: str) -> bool:
        """True when the entity is available in the given store."""
        ...
