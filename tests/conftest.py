"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that exercise the HTTP layer (deselect with '-m \"not api\"')"
    )


@pytest.fixture(autouse=True)
def clear_cached_config():
    """Drop the cached app config and engine so env overrides apply per test."""
    from web.backend.config import get_config
    from web.backend.dependencies import get_matching_engine

    get_config.cache_clear()
    get_matching_engine.cache_clear()
    yield
    get_config.cache_clear()
    get_matching_engine.cache_clear()
