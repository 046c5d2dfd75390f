"""
Pytest fixtures for microshop tests
"""

import httpx
import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def users_client():
    """Users service client with a freshly seeded store"""
    from microshop.users_service.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def products_client():
    """Products service client with a freshly seeded store"""
    from microshop.products_service.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def gateway_client(monkeypatch):
    """
    Factory for gateway clients whose backends are replaced by handlers

    Each handler receives the outbound ``httpx.Request`` and returns an
    ``httpx.Response`` or raises an httpx error.
    """
    from microshop.api_gateway.main import app
    from microshop.api_gateway.utils.service_client import service_clients

    started = []

    def connect(users=None, products=None, transports=None):
        transports = dict(transports or {})
        if users is not None:
            transports["users"] = httpx.MockTransport(users)
        if products is not None:
            transports["products"] = httpx.MockTransport(products)

        for name, transport in transports.items():
            monkeypatch.setattr(service_clients[name], "transport", transport)

        client = TestClient(app)
        client.__enter__()
        started.append(client)
        return client

    yield connect

    for client in started:
        client.__exit__(None, None, None)


@pytest.fixture
def sample_user():
    return {"name": "Alice Walker", "email": "alice.walker@example.com"}


@pytest.fixture
def sample_product():
    return {"name": "Webcam HD", "price": 89.5, "category": "Accessories", "stock": 12}
