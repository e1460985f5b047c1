"""Order Routes — placement, customer history and cancellation (all session-gated)."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from storefront.api.dependencies import get_order_ledger, require_session
from storefront.core.documents import to_json_document
from storefront.core.session_token import SessionClaims
from storefront.schemas.results import DeleteResult, InsertResult
from storefront.services.order_ledger import OrderLedger

router = APIRouter(tags=["orders"])


@router.post("/order", response_model=InsertResult)
async def place_order(
    order_info: dict[str, Any] = Body(...),
    _: SessionClaims = Depends(require_session),
    ledger: OrderLedger = Depends(get_order_ledger),
):
    return InsertResult.from_outcome(await ledger.create(order_info))


@router.get("/customer-order/{email}")
async def list_customer_orders(
    email: str,
    _: SessionClaims = Depends(require_session),
    ledger: OrderLedger = Depends(get_order_ledger),
):
    """Orders for email, each carrying name/image/category of its product."""
    return to_json_document(await ledger.list_by_customer(email))


@router.delete("/order/{order_id}", response_model=DeleteResult)
async def cancel_order(
    order_id: str,
    _: SessionClaims = Depends(require_session),
    ledger: OrderLedger = Depends(get_order_ledger),
):
    return DeleteResult.from_outcome(await ledger.delete(order_id))
