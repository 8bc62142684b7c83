"""Enterprise request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from catalog.models.base import CatalogPayload


class EnterprisePayload(CatalogPayload):
    """Body of POST/PUT /enterprises.

    Every field is optional at the schema level so that a missing required
    field yields the catalog's 400 error body instead of a schema error.
    """

    text_fields = ("name", "image_url", "description", "slug")

    name: Optional[str] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    slug: Optional[str] = None


class Enterprise(BaseModel):
    id: int
    name: str
    image_url: str
    description: Optional[str] = None
    slug: str


__all__ = ["Enterprise", "EnterprisePayload"]
