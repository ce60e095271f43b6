import pytest


@pytest.fixture(autouse=True)
def run_around_tests(catalogue_ctx):
    """Run every catalogue test inside the catalogue domain context."""
    yield
