"""Mongo Repositories — PyMongo implementations of the storage protocols.

Invariants:
    - Every method performs exactly one driver call inside mongo_errors()
    - Inserted documents are copied first (the driver mutates its argument with _id)
    - Quantity changes use $inc (atomic at the document level, no read-then-write)
"""

import logging

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection

from storefront.core.order_history import build_customer_order_pipeline
from storefront.core.repository_protocols import (
    DeleteOutcome, InsertOutcome, UpdateOutcome,
)
from storefront.infrastructure.database import mongo_errors

logger = logging.getLogger(__name__)


def _insert_outcome(result) -> InsertOutcome:
    return InsertOutcome(
        inserted_id=result.inserted_id, acknowledged=result.acknowledged,
    )


def _update_outcome(result) -> UpdateOutcome:
    return UpdateOutcome(
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_id=result.upserted_id,
        acknowledged=result.acknowledged,
    )


class MongoUserRepository:
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def find_by_email(self, email: str) -> dict | None:
        with mongo_errors("find user"):
            return await self.collection.find_one({"email": email})

    async def insert(self, document: dict) -> InsertOutcome:
        with mongo_errors("insert user"):
            result = await self.collection.insert_one(dict(document))
        return _insert_outcome(result)

    async def set_status(self, email: str, status: str) -> UpdateOutcome:
        with mongo_errors("update user status"):
            result = await self.collection.update_one(
                {"email": email}, {"$set": {"status": status}},
            )
        return _update_outcome(result)


class MongoProductRepository:
    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    async def list_all(self) -> list[dict]:
        with mongo_errors("list products"):
            return await self.collection.find().to_list()

    async def get(self, product_id: ObjectId) -> dict | None:
        with mongo_errors("find product"):
            return await self.collection.find_one({"_id": product_id})

    async def insert(self, document: dict) -> InsertOutcome:
        with mongo_errors("insert product"):
            result = await self.collection.insert_one(dict(document))
        return _insert_outcome(result)

    async def increment_quantity(
        self, product_id: ObjectId, amount: int, required_stock: int | None = None,
    ) -> UpdateOutcome:
        query: dict = {"_id": product_id}
        if required_stock is not None:
            query["quantity"] = {"$gte": required_stock}
        with mongo_errors("update product quantity"):
            result = await self.collection.update_one(
                query, {"$inc": {"quantity": amount}},
            )
        return _update_outcome(result)


class MongoOrderRepository:
    def __init__(self, collection: AsyncCollection, products_collection: str = "products"):
        self.collection = collection
        self.products_collection = products_collection

    async def insert(self, document: dict) -> InsertOutcome:
        with mongo_errors("insert order"):
            result = await self.collection.insert_one(dict(document))
        return _insert_outcome(result)

    async def get(self, order_id: ObjectId) -> dict | None:
        with mongo_errors("find order"):
            return await self.collection.find_one({"_id": order_id})

    async def delete(self, order_id: ObjectId) -> DeleteOutcome:
        with mongo_errors("delete order"):
            result = await self.collection.delete_one({"_id": order_id})
        return DeleteOutcome(
            deleted_count=result.deleted_count, acknowledged=result.acknowledged,
        )

    async def list_enriched_by_customer(self, email: str) -> list[dict]:
        pipeline = build_customer_order_pipeline(email, self.products_collection)
        with mongo_errors("aggregate customer orders"):
            cursor = await self.collection.aggregate(pipeline)
            orders = await cursor.to_list()
        logger.debug(f"Loaded {len(orders)} order(s) for customer history")
        return orders
