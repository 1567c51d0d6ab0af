"""Input guards in front of the search provider."""

from dataclasses import replace

import structlog

from storefront.activity.tracking import record_search
from storefront.search import get_search_provider
from storefront.search.port import SearchProvider, SearchQuery
from storefront.settings import get_settings
from storefront.visitor import PagingFilter, VisitorContext

logger = structlog.get_logger(__name__)


class SearchGate:
    def __init__(self, provider: SearchProvider | None = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> SearchProvider:
        return self._provider or get_search_provider()

    def autocomplete(
        self,
        term: str | None,
        visitor: VisitorContext,
        category_id: str | None = None,
        min_length: int | None = None,
    ) -> list[dict]:
        """Suggest products for a partial term.

        Blank terms and terms shorter than ``min_length`` (default: the
        configured minimum search term length) return an empty list without
        reaching the provider.
        """
        settings = get_settings()
        if min_length is None:
            min_length = settings.product_search_term_minimum_length

        if term is None or not term.strip() or len(term) < min_length:
            return []

        return self.provider.autocomplete(
            term=term.strip(),
            category_id=category_id,
            customer_id=visitor.customer_id,
            store_id=visitor.store_id,
            language=visitor.language,
            currency=visitor.currency,
            limit=settings.search_autocomplete_max_results,
        )

    def search(
        self,
        query: SearchQuery | None,
        paging: PagingFilter,
        visitor: VisitorContext,
        term_specified: bool = False,
    ) -> dict:
        """Run a full catalog search.

        Choosing a category in the simple search box switches the query to
        advanced mode restricted to that category.
        """
        record_search(visitor)

        query = query or SearchQuery()
        if query.search_category_id:
            query = replace(query, category_id=query.search_category_id, advanced=True)

        logger.debug("Catalog search", q=query.q, advanced=query.advanced, store_id=visitor.store_id)
        return self.provider.search(query, paging, visitor, term_specified)
