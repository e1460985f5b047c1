"""Mongo Repositories — driver calls issued and driver errors translated.

Tests cover:
    - insert copies the document before handing it to the driver
    - increment_quantity uses $inc and adds the stock floor to the filter only when asked
    - aggregate receives the customer order pipeline
    - PyMongoError subclasses surface as DatabaseError
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, OperationFailure, ServerSelectionTimeoutError

from storefront.core.errors import DatabaseError
from storefront.core.order_history import build_customer_order_pipeline
from storefront.infrastructure.database import mongo_errors
from storefront.infrastructure.mongo_repositories import (
    MongoOrderRepository, MongoProductRepository, MongoUserRepository,
)


def _update_result(matched=1, modified=1):
    return SimpleNamespace(
        matched_count=matched, modified_count=modified, upserted_id=None, acknowledged=True,
    )


async def test_insert_does_not_mutate_caller_document():
    collection = MagicMock()
    collection.insert_one = AsyncMock(
        return_value=SimpleNamespace(inserted_id=ObjectId(), acknowledged=True),
    )
    document = {"email": "a@x.com"}

    outcome = await MongoUserRepository(collection).insert(document)

    sent = collection.insert_one.await_args.args[0]
    assert sent == document and sent is not document
    assert outcome.acknowledged is True


async def test_set_status_filters_by_email():
    collection = MagicMock()
    collection.update_one = AsyncMock(return_value=_update_result())

    await MongoUserRepository(collection).set_status("a@x.com", "Requested")

    collection.update_one.assert_awaited_once_with(
        {"email": "a@x.com"}, {"$set": {"status": "Requested"}},
    )


async def test_increment_quantity_without_floor():
    collection = MagicMock()
    collection.update_one = AsyncMock(return_value=_update_result())
    oid = ObjectId()

    outcome = await MongoProductRepository(collection).increment_quantity(oid, -5)

    collection.update_one.assert_awaited_once_with(
        {"_id": oid}, {"$inc": {"quantity": -5}},
    )
    assert outcome.matched_count == 1


async def test_increment_quantity_with_floor():
    collection = MagicMock()
    collection.update_one = AsyncMock(return_value=_update_result(0, 0))
    oid = ObjectId()

    await MongoProductRepository(collection).increment_quantity(oid, -5, required_stock=5)

    collection.update_one.assert_awaited_once_with(
        {"_id": oid, "quantity": {"$gte": 5}}, {"$inc": {"quantity": -5}},
    )


async def test_list_all_reads_whole_cursor():
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[{"productName": "Serum A"}])
    collection = MagicMock()
    collection.find = MagicMock(return_value=cursor)

    products = await MongoProductRepository(collection).list_all()

    assert products == [{"productName": "Serum A"}]
    collection.find.assert_called_once_with()


async def test_customer_history_runs_pipeline():
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection = MagicMock()
    collection.aggregate = AsyncMock(return_value=cursor)

    await MongoOrderRepository(collection, "products").list_enriched_by_customer("a@x.com")

    collection.aggregate.assert_awaited_once_with(
        build_customer_order_pipeline("a@x.com", "products"),
    )


async def test_delete_reports_count():
    collection = MagicMock()
    collection.delete_one = AsyncMock(
        return_value=SimpleNamespace(deleted_count=1, acknowledged=True),
    )
    oid = ObjectId()

    outcome = await MongoOrderRepository(collection).delete(oid)

    collection.delete_one.assert_awaited_once_with({"_id": oid})
    assert outcome.deleted_count == 1


async def test_driver_error_becomes_database_error():
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers"))

    with pytest.raises(DatabaseError) as exc_info:
        await MongoOrderRepository(collection).get(ObjectId())
    assert exc_info.value.operation == "find order"
    assert exc_info.value.http_status == 500


@pytest.mark.parametrize("error, message", [
    (DuplicateKeyError("dup"), "Duplicate key"),
    (OperationFailure("nope"), "Operation rejected by server"),
])
def test_mongo_errors_mapping(error, message):
    with pytest.raises(DatabaseError) as exc_info:
        with mongo_errors("insert user"):
            raise error
    assert exc_info.value.message == f"Database insert user failed: {message}"


def test_mongo_errors_leaves_other_exceptions_alone():
    with pytest.raises(KeyError):
        with mongo_errors("insert user"):
            raise KeyError("x")
