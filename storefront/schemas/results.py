"""Result Schemas — storage outcomes rendered in the driver's JSON shape.

Invariants:
    - Field names serialize camelCase (insertedId, matchedCount, ...) via aliases
    - Object ids always serialize as strings
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from storefront.core.repository_protocols import (
    DeleteOutcome, InsertOutcome, UpdateOutcome,
)


def _stringify(value: Any) -> str | None:
    return None if value is None else str(value)


class _DriverResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True


class InsertResult(_DriverResult):
    inserted_id: str = Field(alias="insertedId")

    @classmethod
    def from_outcome(cls, outcome: InsertOutcome) -> "InsertResult":
        return cls(
            acknowledged=outcome.acknowledged,
            inserted_id=_stringify(outcome.inserted_id),
        )


class UpdateResult(_DriverResult):
    matched_count: int = Field(alias="matchedCount")
    modified_count: int = Field(alias="modifiedCount")
    upserted_id: str | None = Field(None, alias="upsertedId")

    @classmethod
    def from_outcome(cls, outcome: UpdateOutcome) -> "UpdateResult":
        return cls(
            acknowledged=outcome.acknowledged,
            matched_count=outcome.matched_count,
            modified_count=outcome.modified_count,
            upserted_id=_stringify(outcome.upserted_id),
        )


class DeleteResult(_DriverResult):
    deleted_count: int = Field(alias="deletedCount")

    @classmethod
    def from_outcome(cls, outcome: DeleteOutcome) -> "DeleteResult":
        return cls(
            acknowledged=outcome.acknowledged,
            deleted_count=outcome.deleted_count,
        )
