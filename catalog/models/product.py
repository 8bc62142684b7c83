"""Product request/response models.

Nutrition and packaging fields are free text. Like every catalog payload,
numeric JSON values sent for text fields are stored as their string form.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, field_validator

from catalog.models.base import CatalogPayload

PRODUCT_TEXT_FIELDS = (
    "manufacturer",
    "shelf_life",
    "proteins",
    "fats",
    "carbs",
    "weight",
    "storage",
    "energy",
    "description",
)


class ProductPayload(CatalogPayload):
    text_fields = ("name", "image_url", "slug") + PRODUCT_TEXT_FIELDS

    name: Optional[str] = None
    image_url: Optional[str] = None
    slug: Optional[str] = None
    enterprise_id: Optional[int] = None
    manufacturer: Optional[str] = None
    shelf_life: Optional[str] = None
    proteins: Optional[str] = None
    fats: Optional[str] = None
    carbs: Optional[str] = None
    weight: Optional[str] = None
    storage: Optional[str] = None
    energy: Optional[str] = None
    description: Optional[str] = None

    @field_validator("enterprise_id", mode="before")
    @classmethod
    def blank_enterprise_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Product(BaseModel):
    id: int
    name: str
    image_url: str
    slug: str
    enterprise_id: Optional[int] = None
    manufacturer: Optional[str] = None
    shelf_life: Optional[str] = None
    proteins: Optional[str] = None
    fats: Optional[str] = None
    carbs: Optional[str] = None
    weight: Optional[str] = None
    storage: Optional[str] = None
    energy: Optional[str] = None
    description: Optional[str] = None


__all__ = ["PRODUCT_TEXT_FIELDS", "Product", "ProductPayload"]
