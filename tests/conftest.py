"""
This module contains shared fixtures for testing.
"""

from pathlib import Path

import pytest

from beanwrap._utils import config


@pytest.fixture(autouse=True)
def restore_options():
    """Restore the package options after every test."""
    saved = dict(config._settings)
    yield
    config._settings.clear()
    config._settings.update(saved)


@pytest.fixture
def bundle_path() -> Path:
    """Path to the test resource bundle directory."""
    return Path(__file__).parent / "data" / "bundles"
