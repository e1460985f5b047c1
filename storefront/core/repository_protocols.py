"""Boundary Protocols — contracts between services and storage.

Invariants:
    - Services NEVER import pymongo collections directly; all IO goes through these Protocols
    - Implementations provided by infrastructure via dependency injection
    - Every mutating method is a single atomic storage operation (no read-modify-write)

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory test doubles need no inheritance
    - Outcome dataclasses mirror the driver's result objects so the HTTP layer can
      render them in the shape clients already consume
"""

from dataclasses import dataclass
from typing import Any, Protocol

from bson import ObjectId


@dataclass(frozen=True)
class InsertOutcome:
    inserted_id: Any
    acknowledged: bool = True


@dataclass(frozen=True)
class UpdateOutcome:
    matched_count: int
    modified_count: int
    upserted_id: Any = None
    acknowledged: bool = True


@dataclass(frozen=True)
class DeleteOutcome:
    deleted_count: int
    acknowledged: bool = True


class UserRepository(Protocol):
    """Contract for user persistence, keyed by email."""
    async def find_by_email(self, email: str) -> dict | None: ...
    async def insert(self, document: dict) -> InsertOutcome: ...
    async def set_status(self, email: str, status: str) -> UpdateOutcome: ...


class ProductRepository(Protocol):
    """Contract for product catalog persistence."""
    async def list_all(self) -> list[dict]: ...
    async def get(self, product_id: ObjectId) -> dict | None: ...
    async def insert(self, document: dict) -> InsertOutcome: ...
    async def increment_quantity(
        self, product_id: ObjectId, amount: int, required_stock: int | None = None,
    ) -> UpdateOutcome: ...


class OrderRepository(Protocol):
    """Contract for order persistence."""
    async def insert(self, document: dict) -> InsertOutcome: ...
    async def get(self, order_id: ObjectId) -> dict | None: ...
    async def delete(self, order_id: ObjectId) -> DeleteOutcome: ...
    async def list_enriched_by_customer(self, email: str) -> list[dict]: ...
