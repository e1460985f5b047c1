"""Order Ledger — placement, customer history and cancellation.

Invariants:
    - create stores the order as given and does NOT touch product stock
    - list_by_customer returns orders enriched with product name/image/category
    - delete: malformed id → FieldValidationError, unknown id → ResourceNotFoundError,
      delivered → OrderAlreadyDeliveredError (record left intact), otherwise deleted
"""

import logging

from storefront.core.documents import parse_object_id
from storefront.core.domain_types import OrderStatus
from storefront.core.errors import OrderAlreadyDeliveredError, ResourceNotFoundError
from storefront.core.repository_protocols import (
    DeleteOutcome, InsertOutcome, OrderRepository,
)

logger = logging.getLogger(__name__)


class OrderLedger:
    """Orders, each referencing exactly one product by string id."""

    def __init__(self, orders: OrderRepository):
        self.orders = orders

    async def create(self, order_info: dict) -> InsertOutcome:
        outcome = await self.orders.insert(order_info)
        logger.info(f"Order {outcome.inserted_id} placed")
        return outcome

    async def list_by_customer(self, email: str) -> list[dict]:
        return await self.orders.list_enriched_by_customer(email)

    async def delete(self, order_id: str) -> DeleteOutcome:
        oid = parse_object_id(order_id, "order_id")
        order = await self.orders.get(oid)
        if order is None:
            raise ResourceNotFoundError("Order", order_id)
        if order.get("status") == OrderStatus.DELIVERED.value:
            raise OrderAlreadyDeliveredError(order_id)
        outcome = await self.orders.delete(oid)
        logger.info(f"Order {order_id} cancelled", extra={"resource_id": order_id})
        return outcome
