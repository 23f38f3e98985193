"""
Pytest configuration and shared fixtures for backend tests.

WHAT: Centralized test configuration with markers and fresh state
WHY: Every test starts from an empty registry and an unclaimed catalog
HOW: Define pytest markers, fixtures, and small helpers
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from app.core.state import MarketplaceState
from app.models.marketplace import Product


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (isolated component tests)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (multiple components)"
    )


@pytest.fixture
def state():
    """Fresh marketplace state with the default three-product catalog."""
    return MarketplaceState.create(history_limit=100, anonymous_name="Anonymous")


@pytest.fixture
def single_product_state():
    """State whose catalog holds one unclaimed product with id 1."""
    return MarketplaceState.create(
        products=[Product(id=1, name="Laptop", price=999.99, description="High-performance laptop")],
    )


@pytest.fixture
def mock_sio():
    """
    Stand-in for socketio.AsyncServer.

    WHAT: Records handler registration and emits
    WHY: Exercise the socket adapter without a network
    HOW: MagicMock with an AsyncMock emit
    """
    sio = MagicMock()
    sio.emit = AsyncMock()
    return sio

