"""
Pytest configuration and shared fixtures.

Provides product stores, a wired mediator and an HTTP test client.
"""

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.container import configure_mediator
from app.domains.products.models import Product
from app.domains.products.store import ProductDataStore
from app.main import create_app


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file"""
    return Settings(
        _env_file=None,
        seed_sample_products=True,
        dispatch_timeout_seconds=5.0,
        validate_product_names=False,
        log_level="WARNING"
    )


@pytest.fixture
def sample_products():
    return [
        Product(id=1, name="Test Product 1"),
        Product(id=2, name="Test Product 2"),
        Product(id=3, name="Test Product 3"),
    ]


@pytest.fixture
def store():
    """Store pre-seeded with the three sample products"""
    return ProductDataStore.with_sample_products()


@pytest.fixture
def empty_store():
    return ProductDataStore()


@pytest.fixture
def mediator(store, test_settings):
    """Frozen mediator bound to the seeded store"""
    return configure_mediator(store, test_settings)


@pytest.fixture
def client(test_settings):
    """Test client whose lifespan builds a fresh container"""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
