"""Search provider port (abstract interface).

Ranking and indexing belong to the provider. The storefront only guards
the inputs and passes the visitor's context through unchanged.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from storefront.visitor import PagingFilter, VisitorContext


@dataclass(frozen=True)
class SearchQuery:
    """A catalog search request as submitted by the search form."""

    q: str | None = None
    category_id: str | None = None
    search_category_id: str | None = None
    advanced: bool = False
    include_subcategories: bool = False
    vendor_id: str | None = None
    price_from: float | None = None
    price_to: float | None = None
    search_in_descriptions: bool = False


class SearchProvider(ABC):
    @abstractmethod
    def autocomplete(
        self,
        term: str,
        category_id: str | None,
        customer_id: str,
        store_id: str,
        language: str,
        currency: str,
        limit: int,
    ) -> list[dict]: ...

    @abstractmethod
    def search(
        self,
        query: SearchQuery,
        paging: PagingFilter,
        visitor: VisitorContext,
        term_specified: bool,
    ) -> dict: ...
