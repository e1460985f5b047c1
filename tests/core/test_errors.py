"""Error Hierarchy — status codes and the REST envelope."""

from storefront.core.errors import (
    AuthenticationError,
    DatabaseError,
    ErrorCategory,
    FieldValidationError,
    InsufficientStockError,
    OrderAlreadyDeliveredError,
    ResourceNotFoundError,
    StatusAlreadyRequestedError,
    StorefrontError,
    validation_response,
)


def test_http_statuses():
    assert FieldValidationError("Email is required", "email").http_status == 400
    assert AuthenticationError().http_status == 401
    assert ResourceNotFoundError("Order", "x").http_status == 404
    assert OrderAlreadyDeliveredError("x").http_status == 409
    assert StatusAlreadyRequestedError("a@x.com").http_status == 409
    assert InsufficientStockError("x", 3).http_status == 409
    assert DatabaseError("boom", "insert").http_status == 500


def test_all_errors_share_base():
    assert isinstance(OrderAlreadyDeliveredError("x"), StorefrontError)
    assert isinstance(DatabaseError("boom", "insert"), StorefrontError)


def test_to_response_envelope():
    body = ResourceNotFoundError("Product", "abc").to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "Product 'abc' not found"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["context"] == {"resource_type": "Product", "resource_id": "abc"}
    assert "timestamp" in body


def test_delivered_order_error_is_conflict():
    err = OrderAlreadyDeliveredError("abc")
    assert err.category is ErrorCategory.CONFLICT
    assert err.code == "ORDER_ALREADY_DELIVERED"


def test_field_validation_error_names_field():
    body = FieldValidationError("Email is required", "email").to_response()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["details"] == [
        {"field": "email", "message": "Email is required", "type": "value_error"},
    ]


def test_validation_response_shape():
    body = validation_response("Invalid request data", [{"field": "body.x"}])["error"]
    assert body["message"] == "Invalid request data"
    assert body["details"] == [{"field": "body.x"}]
    assert "timestamp" in body
