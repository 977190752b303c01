"""
Pytest configuration and shared fixtures for randguard tests.
"""

import pytest
from randguard.config.schema import GuardConfig
from randguard.core.guards import BoundGuards


@pytest.fixture
def default_config():
    """Provide default GuardConfig."""
    return GuardConfig()


@pytest.fixture
def minimal_config():
    """Provide 32-bit GuardConfig."""
    return GuardConfig.minimal()


@pytest.fixture
def guards(default_config):
    """Provide guards bound to the default widths."""
    return BoundGuards.from_config(default_config)


@pytest.fixture
def guards32(minimal_config):
    """Provide guards bound to 32-bit widths."""
    return BoundGuards.from_config(minimal_config)
