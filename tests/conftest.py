import pytest
from fastapi.testclient import TestClient

from services.order_service.main import order_app
from services.order_service.exceptions import ProductNotFoundError, ProductServiceError
from services.order_service.product_client import get_product_client
from services.order_service.schemas import Product
from shared.config.database import get_db


class FakeGateway:
    """Records every statement and answers with queued row lists."""

    def __init__(self):
        self.calls = []
        self.results = []
        self.error = None

    def queue(self, rows):
        self.results.append(rows)

    async def query(self, sql, params=None):
        self.calls.append((sql, params))
        if self.error is not None:
            raise self.error
        return self.results.pop(0) if self.results else []


class FakeProductClient:
    def __init__(self):
        self.calls = []
        self.products = {}
        self.error = None

    async def get_product(self, product_id):
        self.calls.append(product_id)
        if self.error is not None:
            raise self.error
        if product_id not in self.products:
            raise ProductNotFoundError(product_id)
        return Product(**self.products[product_id])


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def products():
    return FakeProductClient()


@pytest.fixture
def client(gateway, products):
    order_app.dependency_overrides[get_db] = lambda: gateway
    order_app.dependency_overrides[get_product_client] = lambda: products
    # No context manager: startup would try to reach Postgres
    yield TestClient(order_app)
    order_app.dependency_overrides.clear()


@pytest.fixture
def unavailable_products(products):
    products.error = ProductServiceError(10, "connection refused")
    return products
