"""AccessPolicy decides whether a visitor may see or edit a catalog entity.

can_view() fails closed. A denied view is reported exactly like a missing
entity so that callers cannot tell unpublished or restricted entities apart
from ones that do not exist.
"""

import structlog

from storefront.catalog.kinds import Visibility, kind_of
from storefront.security import get_acl_checker, get_capability_checker
from storefront.security.port import AclChecker, CapabilityChecker
from storefront.visitor import Capability, VisitorContext

logger = structlog.get_logger(__name__)


class AccessPolicy:
    def __init__(
        self,
        capability_checker: CapabilityChecker | None = None,
        acl_checker: AclChecker | None = None,
    ) -> None:
        self._capability_checker = capability_checker
        self._acl_checker = acl_checker

    @property
    def capabilities(self) -> CapabilityChecker:
        return self._capability_checker or get_capability_checker()

    @property
    def acl(self) -> AclChecker:
        return self._acl_checker or get_acl_checker()

    def can_view(self, entity, visitor: VisitorContext) -> bool:
        if entity is None:
            return False

        spec = kind_of(entity)

        if spec.visibility is Visibility.EXISTS:
            return True

        if spec.visibility is Visibility.ACTIVE:
            return not entity.deleted and entity.active

        if not entity.published and not self.capabilities.has_capability(visitor, spec.manage_capability):
            logger.debug("Unpublished entity hidden", kind=spec.kind.value, entity_id=str(entity.id))
            return False

        if not self.acl.authorize_groups(entity, visitor):
            logger.debug("Entity hidden by customer group ACL", kind=spec.kind.value, entity_id=str(entity.id))
            return False

        if not self.acl.authorize_store(entity, visitor.store_id):
            logger.debug(
                "Entity not available in store",
                kind=spec.kind.value,
                entity_id=str(entity.id),
                store_id=visitor.store_id,
            )
            return False

        return True

    def can_edit(self, entity, visitor: VisitorContext) -> bool:
        """Whether to surface an edit link. Never gates visibility."""
        if entity is None:
            return False

        spec = kind_of(entity)
        return self.capabilities.has_capability(
            visitor, Capability.ACCESS_ADMIN_PANEL
        ) and self.capabilities.has_capability(visitor, spec.manage_capability)
