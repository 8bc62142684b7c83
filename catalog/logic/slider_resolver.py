"""Slider enrichment: turn `(type, ref_id)` slider rows into display items.

A slider entry names its target table through a type tag. Resolution looks
the referenced row up in the matching repository and projects it into the
uniform `DisplayItem` shape:

- enterprise / product: title <- name, imageUrl <- image_url, description
- news: title, imageUrl <- image_url, description <- short_description, and
  full_text (falls back to the short description when empty)

Two call modes exist and fail differently. `resolve_all` silently drops
entries with an unknown type or a dangling reference. `resolve_one` reports
a missing slider, an unknown type and a dangling reference as three distinct
errors.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from catalog.errors import InvalidSliderType, ReferencedItemNotFound, SliderNotFound
from catalog.logic.store import CatalogStore
from catalog.models.slider import DisplayItem, SliderEntry, SliderKind

logger = logging.getLogger(__name__)

Projection = Callable[[Dict[str, Any]], Dict[str, Any]]


def load_entry(row: Dict[str, Any]) -> Optional[SliderEntry]:
    """Build a SliderEntry from a stored row.

    The sliders table does not constrain column types, so a row may hold a
    non-integer `ref_id` or `position`. Such a row cannot point at anything and
    yields None. A malformed `type` raises InvalidSliderType.
    """
    try:
        return SliderEntry.model_validate(row)
    except ValidationError as exc:
        if any(err.get("loc", ())[:1] == ("type",) for err in exc.errors()):
            raise InvalidSliderType(row.get("type")) from exc
        logger.info(
            "slider_row_malformed id=%s ref_id=%r position=%r", row.get("id"), row.get("ref_id"), row.get("position")
        )
        return None


def _project_named(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "title": row.get("name"),
        "image_url": row.get("image_url"),
        "description": row.get("description"),
    }


def _project_news(row: Dict[str, Any]) -> Dict[str, Any]:
    short = row.get("short_description")
    return {
        "title": row.get("title"),
        "image_url": row.get("image_url"),
        "description": short,
        "full_text": row.get("full_text") or short,
    }


# One projection per SliderKind member
PROJECTIONS: Dict[SliderKind, Projection] = {
    SliderKind.ENTERPRISE: _project_named,
    SliderKind.PRODUCT: _project_named,
    SliderKind.NEWS: _project_news,
}


class SliderResolver:
    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def resolve(self, entry: SliderEntry) -> Optional[DisplayItem]:
        """Resolve one slider entry.

        Returns None when the referenced row does not exist. Raises
        InvalidSliderType when the entry's type tag is not a known kind.
        """
        kind = SliderKind.parse(entry.type)
        if kind is None:
            raise InvalidSliderType(entry.type)
        projection = PROJECTIONS.get(kind)
        if projection is None:
            raise InvalidSliderType(entry.type)

        row = self.store.repository_for(kind).get(entry.ref_id)
        if row is None:
            return None
        return DisplayItem(
            id=entry.id,
            type=kind.value,
            ref_id=entry.ref_id,
            position=entry.position,
            **projection(row),
        )

    def resolve_all(self, *, sort_by_position: bool = False) -> List[DisplayItem]:
        """Resolve every slider, dropping unknown types and dangling references.

        Items keep store order unless `sort_by_position` is set, in which case
        they are ordered by position, then by slider id.
        """
        items: List[DisplayItem] = []
        for row in self.store.sliders.list():
            try:
                entry = load_entry(row)
                item = self.resolve(entry) if entry is not None else None
            except InvalidSliderType:
                logger.info("slider_skipped_invalid_type id=%s type=%r", row.get("id"), row.get("type"))
                continue
            if item is None:
                logger.info(
                    "slider_skipped_dangling id=%s type=%s ref_id=%r", row.get("id"), row.get("type"), row.get("ref_id")
                )
                continue
            items.append(item)
        if sort_by_position:
            items.sort(key=lambda i: (i.position, i.id))
        return items

    def resolve_one(self, slider_id: int) -> DisplayItem:
        """Resolve a single slider by id.

        Raises SliderNotFound, InvalidSliderType or ReferencedItemNotFound.
        """
        row = self.store.sliders.get(slider_id)
        if row is None:
            raise SliderNotFound(slider_id)
        entry = load_entry(row)
        item = self.resolve(entry) if entry is not None else None
        if item is None:
            raise ReferencedItemNotFound(str(row.get("type")), row.get("ref_id"))
        return item


__all__ = ["PROJECTIONS", "SliderResolver", "load_entry"]
