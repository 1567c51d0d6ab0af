import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Initialize the storefront domain before collection.

    PROTEAN_ENV picks the config overlay from storefront/domain.toml.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from storefront.domain import storefront

    storefront.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    from storefront.domain import storefront
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront)

    yield

    drop_db(storefront)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Push the domain context, reset collaborators, and clean up after every test."""
    from storefront.activity import reset_activity
    from storefront.display import reset_display
    from storefront.domain import storefront
    from storefront.localization import reset_resources
    from storefront.search import reset_search_provider
    from storefront.security import reset_security
    from storefront.settings import StorefrontSettings, reset_settings, set_settings

    ctx = storefront.domain_context()
    ctx.push()

    set_settings(StorefrontSettings())

    yield

    from protean import current_domain

    # Clear all databases
    for _, provider in current_domain.providers.items():
        provider._data_reset()

    # Drain event stores
    current_domain.event_store.store._data_reset()

    reset_activity()
    reset_display()
    reset_resources()
    reset_search_provider()
    reset_security()
    reset_settings()
    ctx.pop()
