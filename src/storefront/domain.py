"""Storefront bounded context: public catalog navigation and vendor reviews.

Decides which catalog entities (categories, brands, collections, vendors,
product tags) a visitor may see, assembles their display models, runs the
vendor review submission and helpfulness voting workflow, and guards the
catalog search entry points.
"""

from protean.domain import Domain

from storefront.utils.logging import get_logger

logger = get_logger(__name__)

storefront = Domain(name="storefront")
