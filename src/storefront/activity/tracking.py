"""Records tracked visitor actions as ShopperVisit aggregates.

Callers have already decided what to show; a visit that cannot be stored is
logged and dropped so that tracking never fails a page.
"""

import structlog
from protean.utils.globals import current_domain

from storefront.activity.visit import ShopperVisit
from storefront.visitor import VisitorContext

logger = structlog.get_logger(__name__)


def _store(visit: ShopperVisit) -> None:
    try:
        current_domain.repository_for(ShopperVisit).add(visit)
    except Exception as e:
        logger.error("Failed to record shopper visit", action=visit.action, error=str(e))


def record_view(visitor: VisitorContext, kind: str, entity_id, subject, activity_key=None, remember_path=True):
    _store(ShopperVisit.viewed(visitor, kind, entity_id, subject, activity_key, remember_path))


def record_search(visitor: VisitorContext) -> None:
    _store(ShopperVisit.searched(visitor))


def record_vendor_review(visitor: VisitorContext, vendor_id, vendor_name) -> None:
    _store(ShopperVisit.reviewed_vendor(visitor, vendor_id, vendor_name))
