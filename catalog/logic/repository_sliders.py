"""Slider data access.

Rows are returned untouched, including type tags outside the known kinds;
rejecting those is the resolver's job.
"""

from __future__ import annotations

from catalog.logic.repository_base import TableRepository


class SliderRepository(TableRepository):
    table = "sliders"
    write_columns = ("type", "ref_id", "position")


__all__ = ["SliderRepository"]
