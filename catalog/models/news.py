"""News item request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from catalog.models.base import CatalogPayload


class NewsPayload(CatalogPayload):
    text_fields = ("title", "image_url", "short_description", "full_text", "slug")

    title: Optional[str] = None
    image_url: Optional[str] = None
    short_description: Optional[str] = None
    full_text: Optional[str] = None
    slug: Optional[str] = None


class NewsItem(BaseModel):
    id: int
    title: str
    image_url: str
    short_description: Optional[str] = None
    full_text: Optional[str] = None
    slug: str
    # Server-assigned; SQLite returns it as text
    created_at: Optional[str] = None


__all__ = ["NewsItem", "NewsPayload"]
