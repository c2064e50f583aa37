# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Pins the default delays low BEFORE any imports read settings
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================

os.environ.setdefault("PROCESSOR_DEFAULT_DELAY_MS", "10")
os.environ.setdefault("PROCESSOR_CREATE_DELAY_MS", "20")

import pytest

from data_processor.config import get_settings


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def small_values():
    """The basic chaining example."""
    return [1, 2, 3]


@pytest.fixture
def sample_values():
    """The complex chaining example."""
    return [5, 10, 15, 20, 25]


@pytest.fixture
def mixed_values():
    """Unsorted values with duplicates, negatives and floats."""
    return [3, -1.5, 7, 3, 0, 12.25, -8]
