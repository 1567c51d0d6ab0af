"""Search provider factory.

Provides get_search_provider() / set_search_provider() to swap the provider;
FakeSearchProvider is the default.
"""

from storefront.search.fake_adapter import FakeSearchProvider
from storefront.search.port import SearchProvider, SearchQuery

_current_provider: SearchProvider | None = None


def get_search_provider() -> SearchProvider:
    global _current_provider
    if _current_provider is None:
        _current_provider = FakeSearchProvider()
    return _current_provider


def set_search_provider(provider: SearchProvider) -> None:
    global _current_provider
    _current_provider = provider


def reset_search_provider() -> None:
    global _current_provider
    _current_provider = None
