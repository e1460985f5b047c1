"""API Dependencies — repository wiring, service construction and the session gate.

Invariants:
    - Repositories are built from the shared database handle per request (cheap wrappers)
    - require_session reads the "token" cookie and raises AuthenticationError on failure
    - Tests swap storage by overriding get_*_repository in app.dependency_overrides
"""

from fastapi import Cookie, Depends
from pymongo.asynchronous.database import AsyncDatabase

from storefront.config import Settings, get_settings
from storefront.core.repository_protocols import (
    OrderRepository, ProductRepository, UserRepository,
)
from storefront.core.session_token import SessionClaims, verify_token
from storefront.infrastructure.database import get_database
from storefront.infrastructure.mongo_repositories import (
    MongoOrderRepository, MongoProductRepository, MongoUserRepository,
)
from storefront.services.order_ledger import OrderLedger
from storefront.services.product_catalog import ProductCatalog
from storefront.services.user_directory import UserDirectory

TOKEN_COOKIE = "token"


# ─── Repositories ───────────────────────────────────────────────

def get_user_repository(
    db: AsyncDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> UserRepository:
    return MongoUserRepository(db[settings.users_collection])


def get_product_repository(
    db: AsyncDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> ProductRepository:
    return MongoProductRepository(db[settings.products_collection])


def get_order_repository(
    db: AsyncDatabase = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> OrderRepository:
    return MongoOrderRepository(
        db[settings.orders_collection], settings.products_collection,
    )


# ─── Services ───────────────────────────────────────────────────

def get_user_directory(
    users: UserRepository = Depends(get_user_repository),
) -> UserDirectory:
    return UserDirectory(users)


def get_product_catalog(
    products: ProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_settings),
) -> ProductCatalog:
    return ProductCatalog(products, allow_negative_stock=settings.allow_negative_stock)


def get_order_ledger(
    orders: OrderRepository = Depends(get_order_repository),
) -> OrderLedger:
    return OrderLedger(orders)


# ─── Session gate ───────────────────────────────────────────────

def require_session(
    token: str | None = Cookie(default=None),
    settings: Settings = Depends(get_settings),
) -> SessionClaims:
    """Gate for mutating and customer-scoped endpoints."""
    return verify_token(token, settings.token_secret, settings.token_algorithm)
