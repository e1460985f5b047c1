"""Request Schemas — presence checks for the few fields handlers consume.

Invariants:
    - Product, order and user profile bodies are free-form documents (not modelled here)
    - QuantityUpdate.status is optional; anything but "increase" means decrease
"""

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """POST /jwt body. A missing email is reported by issue_token, not pydantic."""
    email: str | None = None


class QuantityUpdate(BaseModel):
    """PATCH /products/quantity/{id} body."""
    model_config = ConfigDict(populate_by_name=True)

    quantity_to_update: int = Field(alias="quantityToUpdate")
    status: str | None = None
