import pytest


@pytest.fixture(autouse=True)
def run_around_tests(ordering_ctx):
    """The storefront talks to both domains; clean them after every test."""
    yield
