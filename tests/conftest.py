"""
Pytest configuration and fixtures for ff-clog tests.
"""

import pytest
from ff_clog import CaptureBackend, LoggerConfig, Registry, use_registry


@pytest.fixture
def registry():
    """A fresh registry with nothing registered."""
    return Registry()


@pytest.fixture
def global_registry():
    """Install a fresh process-wide registry for the test and restore the old one after."""
    registry = Registry()
    previous = use_registry(registry)
    yield registry
    use_registry(previous)


@pytest.fixture
def capture():
    """A capture backend initialized at debug level."""
    backend = CaptureBackend()
    backend.init(LoggerConfig(level="debug", service="test_service"))
    return backend
