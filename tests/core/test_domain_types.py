"""Domain Types — stored string values of every enum."""

from storefront.core.domain_types import (
    OrderStatus, QuantityDirection, UserRole, UserStatus,
)


def test_new_users_are_customers():
    assert UserRole.CUSTOMER.value == "customer"


def test_requested_status_is_capitalized():
    assert UserStatus.REQUESTED.value == "Requested"


def test_order_statuses():
    assert OrderStatus.DELIVERED.value == "delivered"
    assert OrderStatus.PENDING.value == "pending"


def test_quantity_directions():
    assert {d.value for d in QuantityDirection} == {"increase", "decrease"}
