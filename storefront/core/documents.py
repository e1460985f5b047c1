"""Document Helpers — object id parsing and JSON rendering of stored documents.

Invariants:
    - parse_object_id raises FieldValidationError for anything that is not a
      24-hex-character id (never bson.errors.InvalidId)
    - coerce_object_id never raises (returns None for malformed input)
    - to_json_document renders ObjectId and datetime values as strings, recursively
"""

from datetime import datetime
from typing import Any

from bson import ObjectId

from storefront.core.errors import FieldValidationError


def parse_object_id(value: str, field: str = "id") -> ObjectId:
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise FieldValidationError(f"Invalid identifier: '{value}'", field)
    return ObjectId(value)


def coerce_object_id(value: Any) -> ObjectId | None:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def to_json_document(value: Any) -> Any:
    """Convert a stored document (or list/scalar) into JSON-safe values."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: to_json_document(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_document(v) for v in value]
    return value
