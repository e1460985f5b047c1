"""Customer Order History — aggregation pipeline joining orders to products.

Invariants:
    - Only orders whose customer.email equals the requested email are returned
    - productId (stored as string) is coerced to ObjectId; malformed ids become null
      instead of failing the whole aggregation
    - At most one product is joined per order (the first match)
    - PROMOTED_PRODUCT_FIELDS are copied onto the order; the joined product
      object never appears in the output
    - Orders whose product does not resolve are kept, without promoted fields

Design Decisions:
    - Join happens in MongoDB ($lookup), not in-process: one round trip
    - Pipeline built by a pure function so its shape is testable without a server
"""

from typing import Any

PRODUCT_JOIN_FIELD = "products"

# order field -> product field
PROMOTED_PRODUCT_FIELDS: dict[str, str] = {
    "name": "productName",
    "image": "image",
    "category": "category",
}


def build_customer_order_pipeline(
    email: str, products_collection: str = "products",
) -> list[dict[str, Any]]:
    joined = f"${PRODUCT_JOIN_FIELD}"
    return [
        {"$match": {"customer.email": email}},
        {
            "$addFields": {
                "productId": {
                    "$convert": {
                        "input": "$productId",
                        "to": "objectId",
                        "onError": None,
                        "onNull": None,
                    },
                },
            },
        },
        {
            "$lookup": {
                "from": products_collection,
                "localField": "productId",
                "foreignField": "_id",
                "as": PRODUCT_JOIN_FIELD,
            },
        },
        {"$addFields": {PRODUCT_JOIN_FIELD: {"$arrayElemAt": [joined, 0]}}},
        {
            "$addFields": {
                order_field: f"{joined}.{product_field}"
                for order_field, product_field in PROMOTED_PRODUCT_FIELDS.items()
            },
        },
        {"$project": {PRODUCT_JOIN_FIELD: 0}},
    ]
