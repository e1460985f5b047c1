"""API test fixtures — FastAPI app with in-memory storage over httpx.

Invariants:
    - Every test gets fresh in-memory repositories
    - Repository dependencies overridden; services and session gate run for real
    - authed_client carries a valid "token" cookie for a@x.com

Design Decisions:
    - ASGITransport does not run the lifespan, so no MongoDB client is ever created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from storefront.api.dependencies import (
    get_order_repository, get_product_repository, get_user_repository,
)
from storefront.config import get_settings
from storefront.core.session_token import issue_token
from storefront.main import app
from tests.fakes import (
    InMemoryOrderRepository, InMemoryProductRepository, InMemoryUserRepository,
)


@pytest.fixture
def repos():
    products = InMemoryProductRepository()
    return {
        "users": InMemoryUserRepository(),
        "products": products,
        "orders": InMemoryOrderRepository(products),
    }


@pytest.fixture
async def client(repos):
    app.dependency_overrides[get_user_repository] = lambda: repos["users"]
    app.dependency_overrides[get_product_repository] = lambda: repos["products"]
    app.dependency_overrides[get_order_repository] = lambda: repos["orders"]

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def session_cookie():
    token = issue_token("a@x.com", get_settings().token_secret)
    return {"Cookie": f"token={token}"}


@pytest.fixture
async def authed_client(client, session_cookie):
    client.headers.update(session_cookie)
    return client
