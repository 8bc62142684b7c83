"""Slider (homepage carousel) models.

A slider entry references one catalog item by `(type, ref_id)`. The set of
kinds is closed; see `SliderKind`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SliderKind(str, Enum):
    ENTERPRISE = "enterprise"
    PRODUCT = "product"
    NEWS = "news"

    @classmethod
    def parse(cls, value: object) -> "SliderKind | None":
        """Return the kind for a stored type tag, or None when unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return None


class SliderPayload(BaseModel):
    type: Optional[str] = None
    ref_id: Optional[int] = None
    position: Optional[int] = None


class SliderEntry(BaseModel):
    """A raw row of the sliders table.

    `type` stays a plain string: rows written before the API validated the
    tag may hold values outside `SliderKind`.
    """

    id: int
    type: str
    ref_id: int
    position: int


class DisplayItem(BaseModel):
    """Uniform projection of a slider entry and the item it references.

    `id` is the slider entry id, not the referenced item's id. `full_text` is
    only set for news entries.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    type: str
    ref_id: int
    position: int
    title: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    description: Optional[str] = None
    full_text: Optional[str] = None


__all__ = ["SliderKind", "SliderPayload", "SliderEntry", "DisplayItem"]
