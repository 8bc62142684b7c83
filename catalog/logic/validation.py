"""Required-field validation for catalog write payloads.

Runs in the route layer before any store call. A text field counts as
missing when it is absent, null or empty; a numeric field only when absent
or null.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

from catalog.errors import InvalidSliderType, MissingFieldsError
from catalog.models.slider import SliderKind

ENTERPRISE_REQUIRED = ("name", "image_url", "slug")
PRODUCT_REQUIRED = ("name", "image_url", "slug")
NEWS_REQUIRED = ("title", "image_url", "slug")
SLIDER_REQUIRED = ("type", "ref_id", "position")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(payload: Dict[str, Any], required: Sequence[str]) -> None:
    missing = [name for name in required if _is_missing(payload.get(name))]
    if missing:
        raise MissingFieldsError(missing)


def validate_slider(payload: Dict[str, Any]) -> SliderKind:
    """Check a slider write payload and return its parsed kind."""
    require_fields(payload, SLIDER_REQUIRED)
    kind = SliderKind.parse(payload.get("type"))
    if kind is None:
        raise InvalidSliderType(payload.get("type"))
    return kind


__all__ = [
    "ENTERPRISE_REQUIRED",
    "PRODUCT_REQUIRED",
    "NEWS_REQUIRED",
    "SLIDER_REQUIRED",
    "require_fields",
    "validate_slider",
]
