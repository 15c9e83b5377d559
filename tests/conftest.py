"""Shared fixtures for minislug tests."""

import pytest

from minislug import DEFAULT_CAPABILITIES, DEFAULT_OPTIONS


@pytest.fixture
def default_options():
    """Default slug options."""
    return DEFAULT_OPTIONS


@pytest.fixture
def all_capabilities():
    """Capabilities with Unicode preservation and transliteration enabled."""
    return DEFAULT_CAPABILITIES
