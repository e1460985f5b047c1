"""Product Catalog — list, fetch, create and stock adjustment.

Invariants:
    - get raises FieldValidationError for malformed ids, ResourceNotFoundError for unknown ones
    - create stores the document as given
    - adjust_quantity is a single $inc: INCREASE adds, anything else subtracts
    - With allow_negative_stock the result may be negative; without it a decrease
      that would go below zero raises InsufficientStockError and changes nothing
"""

import logging

from storefront.core.documents import parse_object_id
from storefront.core.domain_types import QuantityDirection
from storefront.core.errors import InsufficientStockError, ResourceNotFoundError
from storefront.core.repository_protocols import (
    InsertOutcome, ProductRepository, UpdateOutcome,
)
from storefront.core.stock import required_stock, signed_delta

logger = logging.getLogger(__name__)


class ProductCatalog:
    """Product records and their stock counts."""

    def __init__(self, products: ProductRepository, allow_negative_stock: bool = True):
        self.products = products
        self.allow_negative_stock = allow_negative_stock

    async def list_all(self) -> list[dict]:
        return await self.products.list_all()

    async def get_by_id(self, product_id: str) -> dict:
        product = await self.products.get(parse_object_id(product_id, "product_id"))
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return product

    async def create(self, product: dict) -> InsertOutcome:
        return await self.products.insert(product)

    async def adjust_quantity(
        self, product_id: str, delta: int, direction: str | None = None,
    ) -> UpdateOutcome:
        oid = parse_object_id(product_id, "product_id")
        amount = signed_delta(delta, QuantityDirection.parse(direction))
        floor = required_stock(amount, self.allow_negative_stock)

        outcome = await self.products.increment_quantity(oid, amount, floor)
        if floor is not None and outcome.matched_count == 0:
            # Unmatched either because the product is gone or stock is too low
            if await self.products.get(oid) is None:
                raise ResourceNotFoundError("Product", product_id)
            raise InsufficientStockError(product_id, -amount)
        if outcome.matched_count:
            logger.info(
                f"Adjusted quantity of product {product_id} by {amount}",
                extra={"resource_id": product_id},
            )
        return outcome
