"""Configurable fake search provider for development and testing.

Matches terms against a small list of configured products by substring and
records every call, so tests can assert what reached the provider.
"""

from storefront.search.port import SearchProvider


class FakeSearchProvider(SearchProvider):
    def __init__(self, products: list[dict] | None = None) -> None:
        self.products: list[dict] = list(products or [])
        self.calls: list[dict] = []

    def configure(self, products: list[dict]) -> None:
        self.products = list(products)

    def _matches(self, term, category_id):
        needle = (term or "").lower()
        for product in self.products:
            if category_id and product.get("category_id") != category_id:
                continue
            if needle in product.get("name", "").lower():
                yield product

    def autocomplete(self, term, category_id, customer_id, store_id, language, currency, limit):
        self.calls.append(
            {
                "method": "autocomplete",
                "term": term,
                "category_id": category_id,
                "customer_id": customer_id,
                "store_id": store_id,
                "language": language,
                "currency": currency,
                "limit": limit,
            }
        )
        return [{"label": p["name"], "product_id": p.get("id")} for p in self._matches(term, category_id)][:limit]

    def search(self, query, paging, visitor, term_specified):
        self.calls.append(
            {
                "method": "search",
                "query": query,
                "paging": paging,
                "store_id": visitor.store_id,
                "term_specified": term_specified,
            }
        )
        if not term_specified or not query.q:
            return {"q": query.q, "products": [], "no_results": False}

        category_id = query.category_id if query.advanced else None
        products = list(self._matches(query.q, category_id))
        start = (paging.page_number - 1) * paging.page_size
        return {
            "q": query.q,
            "products": products[start : start + paging.page_size],
            "total": len(products),
            "no_results": not products,
        }
