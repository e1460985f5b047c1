"""Service test fixtures — in-memory repositories wired into each component."""

import pytest

from storefront.services.order_ledger import OrderLedger
from storefront.services.product_catalog import ProductCatalog
from storefront.services.user_directory import UserDirectory
from tests.fakes import (
    InMemoryOrderRepository, InMemoryProductRepository, InMemoryUserRepository,
)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def order_repo(product_repo):
    return InMemoryOrderRepository(product_repo)


@pytest.fixture
def directory(user_repo):
    return UserDirectory(user_repo)


@pytest.fixture
def catalog(product_repo):
    return ProductCatalog(product_repo)


@pytest.fixture
def ledger(order_repo):
    return OrderLedger(order_repo)
