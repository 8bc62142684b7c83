"""Homepage slider endpoints.

Reads go through `SliderResolver`: the list view drops unresolvable entries,
the single view reports why an entry cannot be shown.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query

from catalog.logic.slider_resolver import SliderResolver
from catalog.logic.store import CatalogStore, get_store
from catalog.logic.validation import validate_slider
from catalog.models import Created, Deleted, DisplayItem, SliderPayload, Updated

router = APIRouter()


def get_resolver(store: CatalogStore = Depends(get_store)) -> SliderResolver:
    return SliderResolver(store)


@router.get(
    "/sliders",
    response_model=List[DisplayItem],
    response_model_exclude_unset=True,
    operation_id="listSliders",
)
def list_sliders(
    sort: Optional[Literal["position"]] = Query(default=None, description="Opt-in ordering"),
    resolver: SliderResolver = Depends(get_resolver),
):
    return resolver.resolve_all(sort_by_position=sort == "position")


@router.get(
    "/sliders/{slider_id}",
    response_model=DisplayItem,
    response_model_exclude_unset=True,
    operation_id="getSlider",
)
def get_slider(slider_id: int, resolver: SliderResolver = Depends(get_resolver)):
    return resolver.resolve_one(slider_id)


@router.post("/sliders", status_code=201, response_model=Created, operation_id="createSlider")
def create_slider(payload: SliderPayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    kind = validate_slider(fields)
    fields["type"] = kind.value
    return Created(id=store.sliders.create(fields))


@router.put("/sliders/{slider_id}", response_model=Updated, operation_id="replaceSlider")
def replace_slider(slider_id: int, payload: SliderPayload, store: CatalogStore = Depends(get_store)):
    fields = payload.model_dump()
    kind = validate_slider(fields)
    fields["type"] = kind.value
    return Updated(updated=store.sliders.replace(slider_id, fields))


@router.delete("/sliders/{slider_id}", response_model=Deleted, operation_id="deleteSlider")
def delete_slider(slider_id: int, store: CatalogStore = Depends(get_store)):
    return Deleted(deleted=store.sliders.delete(slider_id))


__all__ = ["router", "get_resolver"]
