"""Error Hierarchy — typed, categorized exceptions for all storefront failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are reported to the caller and never retried
    - Infrastructure errors (500-level) carry no driver detail in the user-facing message
    - to_response() produces the REST envelope used by every error handler
    - Validation failures (ours and pydantic's) share validation_response(), which names each field

Design Decisions:
    - Single hierarchy with StorefrontError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHENTICATION = "authentication"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class FieldValidationError(StorefrontError):
    """A required field is missing or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field

    def to_response(self) -> dict:
        return validation_response(
            self.message, [{"field": self.field, "message": self.message, "type": "value_error"}],
        )


class AuthenticationError(StorefrontError):
    """Session token missing, malformed, expired or signed with another key."""
    def __init__(self, reason: str = "missing", context: ErrorContext | None = None):
        super().__init__(
            "Unauthorized access", "UNAUTHORIZED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.reason = reason


class ResourceNotFoundError(StorefrontError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class OrderAlreadyDeliveredError(StorefrontError):
    """Delivered orders can never be cancelled."""
    def __init__(self, order_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "Order"
        ctx.resource_id = order_id
        super().__init__(
            "Cannot cancel once the product is delivered",
            "ORDER_ALREADY_DELIVERED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class StatusAlreadyRequestedError(StorefrontError):
    """User already has a pending status-change request."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "User"
        ctx.resource_id = email
        super().__init__(
            "You have already requested, wait for some time",
            "STATUS_ALREADY_REQUESTED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


class InsufficientStockError(StorefrontError):
    """Decrease would take product stock below zero (negative stock disabled)."""
    def __init__(self, product_id: str, requested: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "Product"
        ctx.resource_id = product_id
        super().__init__(
            f"Insufficient stock to remove {requested} unit(s)",
            "INSUFFICIENT_STOCK", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.requested = requested


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(StorefrontError):
    """Storage operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


def validation_response(message: str, details: list[dict]) -> dict:
    """Envelope shared by every 400 validation failure, with per-field details."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": message,
            "category": ErrorCategory.VALIDATION.value,
            "severity": ErrorSeverity.ERROR.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "details": details,
        },
    }
