"""Enterprise data access."""

from __future__ import annotations

from typing import Any, Dict

from catalog.logic.repository_base import TableRepository


class EnterpriseRepository(TableRepository):
    table = "enterprises"
    write_columns = ("name", "image_url", "description", "slug")

    def prepare_create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        values = super().prepare_create(fields)
        # New enterprises store an empty description rather than NULL
        values["description"] = values.get("description") or ""
        return values


__all__ = ["EnterpriseRepository"]
