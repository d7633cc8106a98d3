import pytest
from fastapi.testclient import TestClient

from response_examples.main import app
from response_examples.services.product_service import ProductService
from response_examples.store import ProductStore


@pytest.fixture(scope="function")
def client():
    """Create test client; the lifespan builds a freshly seeded store for each test."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def store():
    """Seeded product store for direct access in tests."""
    return ProductStore()


@pytest.fixture(scope="function")
def product_service(store):
    """Product service over a fresh seeded store."""
    return ProductService(store)
