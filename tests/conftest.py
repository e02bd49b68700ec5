"""
Pytest configuration and shared fixtures for eulerode tests.
"""

import io

import pytest

from eulerode.prompts import Console

# =============================================================================
# Console Fixtures
# =============================================================================


@pytest.fixture
def make_console():
    """Build a Console fed by the given lines, writing to a StringIO."""

    def _make_console(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        return Console(stdin=stdin, stdout=io.StringIO())

    return _make_console


@pytest.fixture
def output_of():
    """Return everything written to a Console's stdout."""

    def _output_of(console):
        return console.stdout.getvalue()

    return _output_of


# =============================================================================
# Tolerance Fixtures
# =============================================================================


@pytest.fixture
def atol():
    """Absolute tolerance for floating point comparisons."""
    return 1e-10


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that drive the full command line")
