"""Product Routes — catalog listing, lookup, creation and stock adjustment."""

from typing import Any

from fastapi import APIRouter, Body, Depends

from storefront.api.dependencies import get_product_catalog, require_session
from storefront.core.documents import to_json_document
from storefront.core.session_token import SessionClaims
from storefront.schemas.requests import QuantityUpdate
from storefront.schemas.results import InsertResult, UpdateResult
from storefront.services.product_catalog import ProductCatalog

router = APIRouter(tags=["products"])


@router.get("/products")
async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)):
    return to_json_document(await catalog.list_all())


@router.get("/product/{product_id}")
async def get_product(
    product_id: str, catalog: ProductCatalog = Depends(get_product_catalog),
):
    return to_json_document(await catalog.get_by_id(product_id))


@router.patch("/products/quantity/{product_id}", response_model=UpdateResult)
async def update_product_quantity(
    product_id: str,
    body: QuantityUpdate,
    _: SessionClaims = Depends(require_session),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    outcome = await catalog.adjust_quantity(
        product_id, body.quantity_to_update, body.status,
    )
    return UpdateResult.from_outcome(outcome)


@router.post("/products", response_model=InsertResult)
async def create_product(
    product: dict[str, Any] = Body(...),
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    return InsertResult.from_outcome(await catalog.create(product))
