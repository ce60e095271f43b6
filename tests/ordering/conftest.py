import pytest


@pytest.fixture(autouse=True)
def run_around_tests(ordering_ctx):
    """Run every ordering test inside the ordering domain context."""
    yield
