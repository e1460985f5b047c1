"""Domain Types — enums for stored states shared across the storefront.

Invariants:
    - All valid states encoded as Enums, no raw string matching in services
    - Stored values match what existing documents already contain
      ("customer", "Requested", "delivered", "increase"/"decrease")

Design Decisions:
    - str Enums: serialize to JSON and BSON without custom encoders
"""

from enum import Enum


class UserRole(str, Enum):
    """Role stored on user records. New users are always customers."""
    CUSTOMER = "customer"
    SELLER = "seller"
    ADMIN = "admin"


class UserStatus(str, Enum):
    """Status-change lifecycle: unset → REQUESTED, once."""
    REQUESTED = "Requested"


class OrderStatus(str, Enum):
    """Order fulfillment states. DELIVERED orders cannot be cancelled."""
    PENDING = "pending"
    DELIVERED = "delivered"


class QuantityDirection(str, Enum):
    """Direction of a stock adjustment."""
    INCREASE = "increase"
    DECREASE = "decrease"

    @classmethod
    def parse(cls, value: str | None) -> "QuantityDirection":
        """Anything other than "increase" (including None) means decrease."""
        if value == cls.INCREASE.value:
            return cls.INCREASE
        return cls.DECREASE
