"""Product CRUD endpoints.

PUT is a full replace: optional fields left out of the body are cleared.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from catalog.errors import NotFoundError
from catalog.logic.store import CatalogStore, get_store
from catalog.logic.validation import PRODUCT_REQUIRED, require_fields
from catalog.models import Created, Deleted, Product, ProductPayload, Updated

router = APIRouter()


@router.get("/products", response_model=List[Product], operation_id="listProducts")
def list_products(store: CatalogStore = Depends(get_store)):
    return store.products.list()


@router.get("/products/{product_id}", response_model=Product, operation_id="getProduct")
def get_product(product_id: int, store: CatalogStore = Depends(get_store)):
    row = store.products.get(product_id)
    if row is None:
        raise NotFoundError("Product not found")
    return row


@router.post("/products", status_code=201, response_model=Created, operation_id="createProduct")
def create_product(payload: ProductPayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    require_fields(fields, PRODUCT_REQUIRED)
    return Created(id=store.products.create(fields))


@router.put("/products/{product_id}", response_model=Updated, operation_id="replaceProduct")
def replace_product(product_id: int, payload: ProductPayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    require_fields(fields, PRODUCT_REQUIRED)
    return Updated(updated=store.products.replace(product_id, fields))


@router.delete("/products/{product_id}", response_model=Deleted, operation_id="deleteProduct")
def delete_product(product_id: int, store: CatalogStore = Depends(get_store)):
    return Deleted(deleted=store.products.delete(product_id))


__all__ = ["router"]
