"""Default authorization adapters.

VisitorCapabilityChecker trusts the capability set carried on the visitor
context. EntityAclChecker reads the JSON id lists stored on catalog
aggregates; an empty list leaves that axis unrestricted.
"""

from storefront.catalog.acl import load_ids
from storefront.security.port import AclChecker, CapabilityChecker
from storefront.visitor import Capability, VisitorContext


class VisitorCapabilityChecker(CapabilityChecker):
    def has_capability(self, visitor: VisitorContext, capability: Capability) -> bool:
        return visitor.holds(capability)


class EntityAclChecker(AclChecker):
    def authorize_groups(self, entity, visitor: VisitorContext) -> bool:
        allowed = set(load_ids(getattr(entity, "customer_group_ids", None)))
        if not allowed:
            return True
        return bool(allowed & {str(g) for g in visitor.customer_group_ids})

    def authorize_store(self, entity, store_id: str) -> bool:
        allowed = set(load_ids(getattr(entity, "store_ids", None)))
        if not allowed:
            return True
        return str(store_id) in allowed
