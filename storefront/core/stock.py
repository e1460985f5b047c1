"""Stock Rules — signed quantity deltas and the optional non-negative floor.

Invariants:
    - INCREASE adds delta, anything else subtracts it
    - required_stock() is None when negative stock is allowed or the change adds stock
"""

from storefront.core.domain_types import QuantityDirection


def signed_delta(delta: int, direction: QuantityDirection) -> int:
    """Amount to $inc the stored quantity by."""
    if direction is QuantityDirection.INCREASE:
        return delta
    return -delta


def required_stock(amount: int, allow_negative: bool) -> int | None:
    """Minimum current quantity needed for amount to leave stock >= 0."""
    if allow_negative or amount >= 0:
        return None
    return -amount
