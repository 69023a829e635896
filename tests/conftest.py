"""Test configuration and fixtures for copytree."""

import pytest

from copytree.cli.signal_handler import signal_handler


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture(autouse=True)
def reset_signal_state():
    """Keep signals recorded by one test from leaking into the next."""
    signal_handler.reset()
    yield
    signal_handler.reset()
