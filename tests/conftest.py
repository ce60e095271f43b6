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


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _catalogue_domain(request):
    """Initialize the catalogue domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(scope="session")
def _ordering_domain(request, _catalogue_domain):
    """Initialize the ordering domain once per session.

    Order placement prices lines through the catalogue, so the catalogue
    is always initialized first.
    """
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from ordering.domain import ordering

    ordering.init()
    return ordering


@pytest.fixture(scope="session", autouse=True)
def setup_databases(_catalogue_domain, _ordering_domain):
    """Create database schemas for both domains."""
    from shared.db import drop_db, setup_db

    setup_db(_catalogue_domain)
    setup_db(_ordering_domain)

    yield

    drop_db(_ordering_domain)
    drop_db(_catalogue_domain)


def reset_domain(domain):
    """Clear every provider, broker and the event store of ``domain``."""
    with domain.domain_context():
        for _, provider in domain.providers.items():
            provider._data_reset()

        for _, broker in domain.brokers.items():
            broker._data_reset()

        domain.event_store.store._data_reset()


@pytest.fixture
def catalogue_ctx(_catalogue_domain):
    """Push catalogue domain context for a test, with cleanup."""
    ctx = _catalogue_domain.domain_context()
    ctx.push()

    yield _catalogue_domain

    ctx.pop()
    reset_domain(_catalogue_domain)


@pytest.fixture
def ordering_ctx(_ordering_domain, _catalogue_domain):
    """Push ordering domain context for a test, with cleanup of both domains."""
    ctx = _ordering_domain.domain_context()
    ctx.push()

    yield _ordering_domain

    ctx.pop()
    reset_domain(_ordering_domain)
    reset_domain(_catalogue_domain)
