"""Enterprise CRUD endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends

from catalog.errors import NotFoundError
from catalog.logic.store import CatalogStore, get_store
from catalog.logic.validation import ENTERPRISE_REQUIRED, require_fields
from catalog.models import Created, Deleted, Enterprise, EnterprisePayload, Updated

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/enterprises", response_model=List[Enterprise], operation_id="listEnterprises")
def list_enterprises(store: CatalogStore = Depends(get_store)):
    return store.enterprises.list()


@router.get("/enterprises/{enterprise_id}", response_model=Enterprise, operation_id="getEnterprise")
def get_enterprise(enterprise_id: int, store: CatalogStore = Depends(get_store)):
    row = store.enterprises.get(enterprise_id)
    if row is None:
        raise NotFoundError("Enterprise not found")
    return row


@router.post("/enterprises", status_code=201, response_model=Created, operation_id="createEnterprise")
def create_enterprise(payload: EnterprisePayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    logger.info("enterprise_create_request name=%r slug=%r", fields.get("name"), fields.get("slug"))
    require_fields(fields, ENTERPRISE_REQUIRED)
    return Created(id=store.enterprises.create(fields))


@router.put("/enterprises/{enterprise_id}", response_model=Updated, operation_id="replaceEnterprise")
def replace_enterprise(enterprise_id: int, payload: EnterprisePayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    require_fields(fields, ENTERPRISE_REQUIRED)
    return Updated(updated=store.enterprises.replace(enterprise_id, fields))


@router.delete("/enterprises/{enterprise_id}", response_model=Deleted, operation_id="deleteEnterprise")
def delete_enterprise(enterprise_id: int, store: CatalogStore = Depends(get_store)):
    return Deleted(deleted=store.enterprises.delete(enterprise_id))


__all__ = ["router"]
