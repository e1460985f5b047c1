"""Product routes — catalog CRUD and gated quantity adjustment."""

from bson import ObjectId


async def _create(client, **fields):
    res = await client.post("/products", json={"productName": "Serum A", "quantity": 10, **fields})
    assert res.status_code == 200
    return res.json()["insertedId"]


async def test_create_and_list(client):
    product_id = await _create(client, category="skincare")

    res = await client.get("/products")

    assert res.status_code == 200
    assert res.json() == [{
        "_id": product_id, "productName": "Serum A", "quantity": 10, "category": "skincare",
    }]


async def test_get_product(client):
    product_id = await _create(client)
    res = await client.get(f"/product/{product_id}")
    assert res.status_code == 200
    assert res.json()["productName"] == "Serum A"


async def test_get_product_malformed_id(client):
    res = await client.get("/product/nope")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_product_unknown_id(client):
    res = await client.get(f"/product/{ObjectId()}")
    assert res.status_code == 404


async def test_quantity_increase_and_decrease(authed_client, repos):
    product_id = await _create(authed_client)

    res = await authed_client.patch(
        f"/products/quantity/{product_id}",
        json={"quantityToUpdate": 5, "status": "increase"},
    )
    assert res.status_code == 200
    assert res.json() == {
        "acknowledged": True, "matchedCount": 1, "modifiedCount": 1, "upsertedId": None,
    }
    assert repos["products"].documents[0]["quantity"] == 15

    await authed_client.patch(
        f"/products/quantity/{product_id}", json={"quantityToUpdate": 5},
    )
    assert repos["products"].documents[0]["quantity"] == 10


async def test_quantity_can_go_negative(authed_client, repos):
    product_id = await _create(authed_client)

    res = await authed_client.patch(
        f"/products/quantity/{product_id}",
        json={"quantityToUpdate": 25, "status": "decrease"},
    )

    assert res.status_code == 200
    assert repos["products"].documents[0]["quantity"] == -15


async def test_quantity_requires_amount(authed_client):
    product_id = await _create(authed_client)
    res = await authed_client.patch(
        f"/products/quantity/{product_id}", json={"status": "increase"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.quantityToUpdate"


async def test_malformed_product_id_names_field(client):
    res = await client.get("/product/bad")

    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"] == [{
        "field": "product_id",
        "message": "Invalid identifier: 'bad'",
        "type": "value_error",
    }]
